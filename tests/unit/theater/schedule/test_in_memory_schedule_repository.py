from datetime import timedelta

from theater.schedule.infrastructure import InMemoryScheduleRepository


class TestInMemoryScheduleRepository:
    def test_save_and_find(self, create_theater, today):
        repository = InMemoryScheduleRepository()
        theater = create_theater()

        repository.save(theater)

        assert repository.find_by_id(today) is theater

    def test_find_missing_returns_none(self, today):
        assert InMemoryScheduleRepository().find_by_id(today) is None

    def test_save_replaces_same_date(self, create_theater, today):
        repository = InMemoryScheduleRepository()
        repository.save(create_theater())
        replacement = create_theater()

        repository.save(replacement)

        assert repository.find_by_id(today) is replacement
        assert repository.find_by_id(today + timedelta(days=1)) is None
