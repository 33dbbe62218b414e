"""
Unit tests for merge_messages: identity dedup and order independence.
"""

from datetime import datetime, timedelta, timezone

from promptcraft.domain.services import merge_messages
from tests.fakes import make_message, new_conversation_id

T0 = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class TestMergeMessages:
    def setup_method(self):
        self.cid = new_conversation_id()
        self.a = make_message(self.cid, "a", created_at=T0)
        self.b = make_message(self.cid, "b", created_at=T0 + timedelta(seconds=1))
        self.c = make_message(self.cid, "c", created_at=T0 + timedelta(seconds=2))

    def test_incoming_is_sorted_into_place(self):
        merged, added = merge_messages([self.a, self.c], [self.b])
        assert merged == [self.a, self.b, self.c]
        assert added == [self.b]

    def test_known_message_is_not_added_again(self):
        merged, added = merge_messages([self.a, self.b], [self.b])
        assert merged == [self.a, self.b]
        assert added == []

    def test_duplicates_within_incoming_collapse(self):
        merged, added = merge_messages([], [self.a, self.a])
        assert merged == [self.a]
        assert added == [self.a]

    def test_result_does_not_depend_on_arrival_order(self):
        """Whatever order the same messages arrive in, the list ends up the same."""
        one_way, _ = merge_messages(merge_messages([], [self.a, self.b])[0], [self.c])
        other_way, _ = merge_messages(merge_messages([], [self.c])[0], [self.b, self.a])
        with_repeats, _ = merge_messages(
            merge_messages([self.b], [self.c, self.b])[0], [self.a, self.c]
        )

        assert one_way == other_way == with_repeats == [self.a, self.b, self.c]

    def test_equal_timestamps_ordered_by_id(self):
        first = make_message(self.cid, created_at=T0, message_id="00000000-0000-4000-8000-000000000001")
        second = make_message(self.cid, created_at=T0, message_id="00000000-0000-4000-8000-000000000002")

        merged_one_way, _ = merge_messages([second], [first])
        merged_other_way, _ = merge_messages([first], [second])
        assert merged_one_way == merged_other_way == [first, second]

    def test_inputs_are_not_mutated(self):
        existing = [self.a]
        merge_messages(existing, [self.b])
        assert existing == [self.a]
