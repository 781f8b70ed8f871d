import json

import pytest

from frame_promptly.core.application.context import WorkflowContextManager
from frame_promptly.core.domain.prompt import PromptingMethod
from frame_promptly.core.domain.workflow import StageArtifact, SummaryLength

RESEARCH_NOTES = (
    "We interviewed twelve customers. A key finding is that onboarding is confusing. "
    "Users revealed they skip the tutorial! We should shorten the signup flow. "
    "The team must test a new welcome screen. Pricing was rarely mentioned."
)


@pytest.fixture
def manager():
    return WorkflowContextManager()


def _artifact(stage_id="empathize", content=RESEARCH_NOTES, **extra):
    return StageArtifact(id=f"art-{stage_id}", stage_id=stage_id, content=content, **extra)


def test_store_artifact_summarizes(manager):
    summary = manager.store_artifact("empathize", _artifact())

    assert summary.source_stage_id == "empathize"
    assert summary.id == "summary-empathize"
    assert summary.summary.startswith("We interviewed twelve customers. A key finding")
    assert summary.key_insights == (
        "A key finding is that onboarding is confusing",
        "Users revealed they skip the tutorial",
    )
    assert summary.actionable_items == (
        "We should shorten the signup flow",
        "The team must test a new welcome screen",
    )
    assert manager.get_summary("empathize") == summary
    assert manager.get_artifact("empathize").content == RESEARCH_NOTES


@pytest.mark.parametrize("length, sentences", [(SummaryLength.SHORT, 2), (SummaryLength.MEDIUM, 4), (SummaryLength.LONG, 6)])
def test_summary_length(length, sentences):
    summary = WorkflowContextManager.summarize("s", RESEARCH_NOTES, length)
    assert summary.summary.count(". ") + 1 == sentences
    assert summary.summary.endswith(".")


def test_summary_of_empty_content():
    summary = WorkflowContextManager.summarize("s", "")
    assert summary.summary == ""
    assert summary.key_insights == ()


def test_insights_are_capped():
    content = ". ".join(f"Insight number {i}" for i in range(10))
    assert len(WorkflowContextManager.summarize("s", content).key_insights) == 5


def test_context_chain_and_stage_context(manager):
    manager.store_artifact("empathize", _artifact())
    manager.store_artifact("define", _artifact("define", "Problem statement drafted. It is important to focus on teens."))

    chain = manager.build_context_chain(["empathize", "define", "missing"])
    assert chain.startswith("Stage empathize: We interviewed twelve customers.")
    assert "Stage define: Problem statement drafted." in chain
    assert "Key insights: It is important to focus on teens" in chain
    assert "missing" not in chain

    stage_context = manager.context_for_stage("ideate", ["empathize", "define", "ideate"])
    assert stage_context.splitlines()[0].startswith("From empathize: ")
    assert stage_context.splitlines()[1].startswith("From define: ")


def test_workflow_key_value_context(manager):
    manager.set_workflow_context("persona", {"name": "Ana"})
    assert manager.get_workflow_context("persona") == {"name": "Ana"}
    assert manager.get_workflow_context("missing") is None
    assert manager.all_workflow_context() == {"persona": {"name": "Ana"}}


def test_export_import_round_trip(manager):
    manager.store_artifact("empathize", _artifact(method=PromptingMethod.FEW_SHOT))
    manager.set_workflow_context("goal", "retention")
    exported = manager.export_context()

    restored = WorkflowContextManager()
    assert restored.import_context(exported) is True

    artifact = restored.get_artifact("empathize")
    assert artifact == manager.get_artifact("empathize")
    assert artifact.method is PromptingMethod.FEW_SHOT
    assert restored.get_summary("empathize") == manager.get_summary("empathize")
    assert restored.get_workflow_context("goal") == "retention"
    assert json.loads(exported)["workflowContext"] == {"goal": "retention"}


def test_import_rejects_malformed_payload(manager):
    manager.set_workflow_context("keep", 1)

    assert manager.import_context("{not json") is False
    assert manager.import_context(json.dumps({"artifacts": {"x": {"unexpected": 1}}})) is False
    assert manager.get_workflow_context("keep") == 1


def test_remove_and_clear(manager):
    manager.store_artifact("empathize", _artifact())
    manager.store_artifact("define", _artifact("define"))

    manager.remove_stage_context("empathize")
    assert manager.get_artifact("empathize") is None
    assert manager.get_summary("empathize") is None
    assert len(manager.all_artifacts()) == 1

    manager.clear()
    assert manager.all_artifacts() == []
