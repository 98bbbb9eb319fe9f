from .create_reservation import CreateReservationService as CreateReservationService
