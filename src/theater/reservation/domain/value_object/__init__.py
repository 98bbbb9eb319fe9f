from .customer import Customer as Customer
