"""Tests for the validate/animate drivers."""

import pytest

from automata_lab.definitions import create_automaton
from automata_lab.engine import StepRejection
from automata_lab.runner import RunOutcome, Verdict, animate, validate


class TestValidate:
    """Tests for the synchronous driver."""

    def test_stops_at_first_rejection(self, email_automaton):
        outcome = validate(email_automaton, "a#b#c")

        assert len(outcome.steps) == 2
        assert isinstance(outcome.steps[-1], StepRejection)
        assert outcome.steps[-1].symbol == "#"
        assert not outcome.valid

    def test_resets_before_running(self, email_automaton):
        validate(email_automaton, "abc@")
        outcome = validate(email_automaton, "x@y.z")

        assert outcome.accepted
        assert len(email_automaton.history) == 5

    def test_reports_verdict_notifications(self, remainder_automaton, collector):
        collector.clear()

        validate(remainder_automaton, "12")

        assert collector.messages[-2:] == [
            'String "12" ACCEPTED.',
            "Conclusion: Accepted because the sum of its digits is 3, which is a multiple of 3.",
        ]
        assert collector.severities[-2:] == ["success", "success"]

    def test_rejection_notifications_use_error_severity(self, remainder_automaton, collector):
        collector.clear()

        outcome = validate(remainder_automaton, "1")

        assert outcome.verdict is Verdict.INCOMPLETE
        assert collector.messages[-2] == 'String "1" REJECTED.'
        assert collector.severities[-2:] == ["error", "error"]

    def test_outcome_properties(self):
        outcome = RunOutcome(text="", verdict=Verdict.INCOMPLETE, final_state=None, conclusion="")

        assert outcome.valid
        assert not outcome.accepted
        assert outcome.steps == []


class TestAnimate:
    """Tests for the paced driver."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["a@b.com", "a..b@c.com", "abc", "", "x-y@z"])
    async def test_same_outcome_as_validate(self, text):
        expected = validate(create_automaton("email"), text)
        automaton = create_automaton("email")

        outcome = await animate(automaton, text, delay=0)

        assert outcome.verdict is expected.verdict
        assert outcome.final_state == expected.final_state
        assert outcome.conclusion == expected.conclusion
        assert outcome.steps == expected.steps

    @pytest.mark.asyncio
    async def test_delay_does_not_change_result(self):
        fast = await animate(create_automaton("remainder"), "1234", delay=0)
        slow = await animate(create_automaton("remainder"), "1234", delay=0.01)

        assert fast.steps == slow.steps
        assert fast.final_state == slow.final_state

    @pytest.mark.asyncio
    async def test_on_step_callback(self, remainder_automaton):
        seen = []

        await animate(remainder_automaton, "12x3", delay=0, on_step=seen.append)

        assert [r.symbol for r in seen] == ["1", "2", "x"]
        assert not seen[-1].valid

    @pytest.mark.asyncio
    async def test_negative_delay(self, remainder_automaton):
        with pytest.raises(ValueError, match="delay"):
            await animate(remainder_automaton, "1", delay=-1)


class TestFailingObserver:
    """Runs complete even when the observer raises."""

    @staticmethod
    def failing_observer(notification):
        raise RuntimeError("log panel gone")

    def test_validate_returns_outcome(self):
        automaton = create_automaton("email", observer=self.failing_observer)

        outcome = validate(automaton, "a@b.com")

        assert outcome.verdict is Verdict.ACCEPTED
        assert outcome.final_state.id == "q5"
        assert len(automaton.history) == 7

    @pytest.mark.asyncio
    async def test_animate_returns_outcome(self):
        automaton = create_automaton("remainder", observer=self.failing_observer)

        outcome = await animate(automaton, "11", delay=0)

        assert outcome.verdict is Verdict.INCOMPLETE
