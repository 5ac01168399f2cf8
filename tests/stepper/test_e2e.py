"""End-to-end flows: approval wizard driven by deferred external events."""

from __future__ import annotations

import pytest

from stepper import SequenceExhausted, Stepper


class ApprovalFlow:
    """Draft -> review -> publish, where review waits for an external decision."""

    def __init__(self) -> None:
        self.events: list[str] = []
        self.waiting = None
        self.rejections: list[dict] = []
        self.stepper = Stepper(
            [self.draft, self.review, self.publish],
            on_reject=self.rejections.append,
        )

    def draft(self, step, doc, is_last):
        self.events.append("draft")
        step.next({**doc, "drafted": True})

    def review(self, step, doc, is_last):
        self.events.append("review")
        self.waiting = (step, doc)

    def publish(self, step, doc, is_last):
        self.events.append(f"publish(last={is_last})")

    def decide(self, approved: bool) -> None:
        step, doc = self.waiting
        self.waiting = None
        if approved:
            step.next({**doc, "approved": True})
        else:
            step.reject({**doc, "approved": False})


@pytest.mark.integration
class TestApprovalFlow:
    def test_approved_document_is_published(self):
        flow = ApprovalFlow()
        flow.stepper.start({"title": "t"})
        assert flow.events == ["draft", "review"]
        assert flow.stepper.position == 1

        flow.decide(approved=True)
        assert flow.events == ["draft", "review", "publish(last=True)"]
        with pytest.raises(SequenceExhausted):
            flow.stepper.next()

    def test_rejected_document_stops_at_review(self):
        flow = ApprovalFlow()
        flow.stepper.start({"title": "t"})
        flow.decide(approved=False)
        assert flow.rejections == [{"title": "t", "drafted": True, "approved": False}]
        assert flow.stepper.position == 1
        assert "publish(last=True)" not in flow.events

    def test_extra_review_inserted_while_waiting(self):
        flow = ApprovalFlow()
        flow.stepper.start({"title": "t"})
        step, _ = flow.waiting
        step.insert_after(flow.review)

        flow.decide(approved=True)
        assert flow.events[-1] == "review"
        flow.decide(approved=True)
        assert flow.events[-1] == "publish(last=True)"
        assert len(flow.stepper) == 4

    def test_restart_after_rejection(self):
        flow = ApprovalFlow()
        flow.stepper.start({"title": "t"})
        flow.decide(approved=False)
        flow.stepper.start({"title": "t2"})
        flow.decide(approved=True)
        assert flow.events == [
            "draft",
            "review",
            "draft",
            "review",
            "publish(last=True)",
        ]

    def test_compiled_flow_matches_stepper_flow(self):
        flow = ApprovalFlow()
        chain = flow.stepper.compile()
        chain({"title": "t"})
        step, doc = flow.waiting
        assert doc == {"title": "t", "drafted": True}
        step.next(doc)
        assert flow.events == ["draft", "review", "publish(last=True)"]
        assert not flow.stepper.started
