import pytest

from frame_promptly.core.application.recommendations import clamp_confidence, rank
from frame_promptly.core.domain.prompt import PromptingMethod
from frame_promptly.core.domain.recommendation import (
    AIRecommendation,
    Complexity,
    EstimatedImpact,
    ProjectContext,
    RecommendationContext,
    RecommendationType,
    SkillLevel,
    TeamSize,
    Timeline,
    UserHistory,
)
from frame_promptly.core.domain.workflow import StageArtifact, Workflow, WorkflowStage


def make_context(skill=SkillLevel.INTERMEDIATE, project=None, completed=(), preferred=()):
    return RecommendationContext(
        completed_stages=frozenset(completed),
        project_context=project,
        user_history=UserHistory(preferred_methods=frozenset(preferred), skill_level=skill),
    )


def _assert_well_formed(recommendations):
    confidences = [r.confidence for r in recommendations]
    assert all(0.1 <= c <= 1.0 for c in confidences)
    assert confidences == sorted(confidences, reverse=True)


def _workflow(framework="design-thinking", completed=()):
    stages = tuple(
        WorkflowStage(id=f"ws-{i}", framework_stage_id=stage_id, order=i, is_completed=True)
        for i, stage_id in enumerate(completed, start=1)
    )
    return Workflow(id="wf-1", name="Discovery", framework_type=framework, stages=stages)


# ── Helpers ───────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "raw, expected",
    [(-0.5, 0.1), (0.0, 0.1), (0.1, 0.1), (0.55, 0.55), (1.1, 1.0), (0.6 + 0.3 + 0.2, 1.0), (0.7 - 0.3, 0.4)],
)
def test_clamp_confidence(raw, expected):
    assert clamp_confidence(raw) == expected


def test_rank_is_stable_for_ties():
    def rec(title, confidence):
        return AIRecommendation(
            type=RecommendationType.TOOL,
            title=title,
            description="",
            confidence=confidence,
            rationale="",
            target_id=title,
            category="",
            estimated_impact=EstimatedImpact.LOW,
        )

    ranked = rank([rec("a", 0.5), rec("b", 0.9), rec("c", 0.5)])
    assert [r.title for r in ranked] == ["b", "a", "c"]


# ── Frameworks ────────────────────────────────────────────────────


def test_framework_defaults_without_project(engine):
    recommendations = engine.recommend_framework(RecommendationContext())

    assert [(r.target_id, r.confidence) for r in recommendations] == [
        ("design-thinking", 0.8),
        ("double-diamond", 0.7),
    ]


def test_framework_rules_all_fire(engine):
    project = ProjectContext(
        domain="fintech", complexity=Complexity.COMPLEX, timeline=Timeline.TIGHT, team_size=TeamSize.LARGE
    )
    recommendations = engine.recommend_framework(RecommendationContext(project_context=project))

    assert [(r.target_id, r.confidence) for r in recommendations] == [
        ("google-design-sprint", 0.9),
        ("double-diamond", 0.85),
        ("agile-ux", 0.8),
    ]
    _assert_well_formed(recommendations)


def test_framework_domain_keywords_are_case_insensitive(engine):
    project = ProjectContext(domain="Enterprise Agile Platform")
    recommendations = engine.recommend_framework(RecommendationContext(project_context=project))
    assert [r.target_id for r in recommendations] == ["double-diamond", "agile-ux"]


def test_framework_no_rule_matches(engine):
    project = ProjectContext(domain="retail")
    assert engine.recommend_framework(RecommendationContext(project_context=project)) == []


# ── Stages ────────────────────────────────────────────────────────


def test_next_stage_from_scratch(engine):
    recommendations = engine.recommend_next_stage(_workflow(), make_context())

    assert [r.target_id for r in recommendations] == ["empathize"]
    # two input requirements against zero completed stages
    assert recommendations[0].confidence == 0.4
    assert recommendations[0].title == "Next: Empathize"


def test_next_stage_beginner_boost_on_first_stage(engine):
    recommendations = engine.recommend_next_stage(_workflow(), make_context(skill=SkillLevel.BEGINNER))
    assert recommendations[0].confidence == 0.6


def test_next_stage_requirements_satisfied(engine):
    recommendations = engine.recommend_next_stage(_workflow(completed=("empathize", "define")), make_context())
    assert [(r.target_id, r.confidence) for r in recommendations] == [("ideate", 0.7)]


def test_next_stage_merges_workflow_and_context_completion(engine):
    recommendations = engine.recommend_next_stage(
        _workflow(completed=("empathize",)), make_context(completed=("define",))
    )
    assert [r.target_id for r in recommendations] == ["ideate"]


def test_next_stage_never_skips_prerequisites(engine, catalog):
    framework = catalog.get_framework("design-thinking")
    order = [s.id for s in framework.ordered_stages()]

    recommendations = engine.recommend_next_stage(_workflow(), make_context(completed=("define", "prototype")))

    for recommendation in recommendations:
        index = order.index(recommendation.target_id)
        assert all(prior in ("define", "prototype") for prior in order[:index])
    assert [r.target_id for r in recommendations] == ["empathize"]


def test_next_stage_all_completed(engine):
    done = ("empathize", "define", "ideate", "prototype", "test")
    assert engine.recommend_next_stage(_workflow(completed=done), make_context()) == []


@pytest.mark.parametrize("framework", ["unknown-framework", "google-design-sprint"])
def test_next_stage_degrades_to_empty(engine, framework):
    assert engine.recommend_next_stage(_workflow(framework=framework), make_context()) == []


# ── Tools ─────────────────────────────────────────────────────────


def test_tools_beginner_tight_timeline(engine):
    context = make_context(skill=SkillLevel.BEGINNER, project=ProjectContext(timeline=Timeline.TIGHT))

    recommendations = engine.recommend_tools("empathize", "design-thinking", context)

    assert [(r.target_id, r.confidence) for r in recommendations] == [
        ("user-interviews", 1.0),
        ("surveys", 0.9),
        ("observations", 0.8),
    ]
    _assert_well_formed(recommendations)


def test_tools_below_threshold_are_dropped(engine):
    context = make_context(skill=SkillLevel.BEGINNER, project=ProjectContext(timeline=Timeline.TIGHT))

    recommendations = engine.recommend_tools("test", "design-thinking", context)

    assert "ab-tests" not in [r.target_id for r in recommendations]
    assert all(r.confidence > 0.3 for r in recommendations)


def test_tools_expert_prefers_advanced(engine):
    recommendations = engine.recommend_tools("prototype", "design-thinking", make_context(skill=SkillLevel.EXPERT))
    assert recommendations[0].target_id == "mockups"
    assert recommendations[0].confidence == 0.8
    assert recommendations[0].estimated_impact == EstimatedImpact.HIGH


def test_tools_unknown_stage(engine):
    assert engine.recommend_tools("nope", "design-thinking", make_context()) == []
    assert engine.recommend_tools("empathize", "nope", make_context()) == []


# ── Templates ─────────────────────────────────────────────────────


def test_templates_match_tool_tags(engine):
    recommendations = engine.recommend_prompt_templates("user-interviews", make_context())

    assert [(r.target_id, r.confidence) for r in recommendations] == [
        ("user-interview-guide", 0.7),
        ("persona-generator", 0.7),
    ]


def test_templates_preferred_method_boost(engine):
    context = make_context(preferred=(PromptingMethod.FEW_SHOT.value,))
    recommendations = engine.recommend_prompt_templates("user-interviews", context)
    assert recommendations[0].target_id == "persona-generator"
    assert recommendations[0].confidence == 0.9


def test_templates_empty_tool_only_preferred_methods(engine):
    context = make_context(preferred=("step-by-step",))
    recommendations = engine.recommend_prompt_templates("", context)
    assert [(r.target_id, r.confidence) for r in recommendations] == [("journey-map-creator", 0.6)]


def test_templates_threshold_is_exclusive(engine):
    assert engine.recommend_prompt_templates("unrelated", RecommendationContext()) == []


# ── Prompting methods ─────────────────────────────────────────────


@pytest.mark.parametrize("skill", list(SkillLevel))
def test_methods_always_six(engine, skill):
    recommendations = engine.recommend_prompt_methods("any", make_context(skill=skill))

    assert len(recommendations) == 6
    assert {r.target_id for r in recommendations} == {m.value for m in PromptingMethod}
    _assert_well_formed(recommendations)


def test_methods_without_history(engine):
    recommendations = engine.recommend_prompt_methods(None, RecommendationContext())
    assert len(recommendations) == 6


def test_methods_beginner_ordering(engine):
    recommendations = engine.recommend_prompt_methods("t", make_context(skill=SkillLevel.BEGINNER))
    assert [(r.target_id, r.confidence) for r in recommendations] == [
        ("few-shot", 0.9),
        ("instruction-tuning", 0.8),
        ("step-by-step", 0.8),
        ("chain-of-thought", 0.6),
        ("role-playing", 0.6),
        ("zero-shot", 0.4),
    ]


def test_methods_expert_ordering(engine):
    recommendations = engine.recommend_prompt_methods("t", make_context(skill=SkillLevel.EXPERT))
    assert [r.target_id for r in recommendations] == [
        "instruction-tuning",
        "chain-of-thought",
        "few-shot",
        "zero-shot",
        "role-playing",
        "step-by-step",
    ]
    assert recommendations[0].title == "Instruction Tuning"


# ── Artifacts ─────────────────────────────────────────────────────


def _artifact(content):
    return StageArtifact(id="a", stage_id="s", content=content)


def test_artifacts_empty(engine):
    recommendations = engine.recommend_based_on_artifacts([])

    assert len(recommendations) == 1
    assert recommendations[0].confidence == 0.9
    assert recommendations[0].target_id == "empathize"


def test_artifacts_research_suggests_prototyping(engine):
    recommendations = engine.recommend_based_on_artifacts([_artifact("User RESEARCH findings")])
    assert [(r.target_id, r.confidence) for r in recommendations] == [("prototype", 0.85)]


def test_artifacts_prototype_suggests_testing(engine):
    recommendations = engine.recommend_based_on_artifacts(
        [_artifact("interview notes from users"), _artifact("Prototype v2")]
    )
    assert [(r.target_id, r.confidence) for r in recommendations] == [("test", 0.8)]


def test_artifacts_without_keywords(engine):
    assert engine.recommend_based_on_artifacts([_artifact("meeting minutes")]) == []
