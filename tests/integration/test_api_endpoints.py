from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from frame_promptly.core.application.ports import FunctionInvokerPort
from frame_promptly.infrastructure.configuration import Settings
from frame_promptly.infrastructure.entrypoints.api import document_router
from frame_promptly.infrastructure.entrypoints.api.app_factory import create_app
from frame_promptly.infrastructure.entrypoints.api.dependencies import get_function_invoker


@pytest.fixture
def invoker():
    return AsyncMock(spec=FunctionInvokerPort)


@pytest.fixture
def client(invoker):
    app = create_app(Settings(app_name="FramePromptlyTest", APP_ENV="test", SUPABASE_ANON_KEY=None))
    app.dependency_overrides[get_function_invoker] = lambda: invoker
    with TestClient(app) as test_client:
        yield test_client


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["service"] == "frame-promptly"


def test_build_prompt_with_inline_template(client):
    payload = {
        "method": "instruction-tuning",
        "template": {
            "id": "custom",
            "name": "Custom",
            "template": "Ignored",
            "category": "Research",
            "description": "Guide",
        },
        "frameworkType": "design-thinking",
        "variables": {"task": "Write interview questions", "userInput": "Mobile banking app"},
        "context": "New app for teens",
    }

    response = client.post("/api/v1/prompts/build", json=payload)

    assert response.status_code == 200
    body = response.json()
    assert body["method"] == "instruction-tuning"
    assert body["templateId"] == "custom"
    assert "You are a Design Thinking expert focused on human-centered innovation." in body["prompt"]
    assert "- Focus on Research best practices" in body["prompt"]


def test_build_prompt_with_library_template(client):
    response = client.post(
        "/api/v1/prompts/build",
        json={"method": "zero-shot", "templateId": "persona-generator", "variables": {"task": "Draft persona"}},
    )
    assert response.status_code == 200
    assert "Task: Draft persona" in response.json()["prompt"]


def test_build_prompt_unknown_method_is_422(client):
    response = client.post(
        "/api/v1/prompts/build", json={"method": "tree-of-thought", "templateId": "persona-generator"}
    )
    assert response.status_code == 422
    assert "Unknown prompting method 'tree-of-thought'" in response.json()["detail"]


def test_build_prompt_unknown_template_is_404(client):
    response = client.post("/api/v1/prompts/build", json={"method": "zero-shot", "templateId": "missing"})
    assert response.status_code == 404
    assert response.json()["detail"] == "Template missing not found"


def test_build_prompt_requires_a_template(client):
    response = client.post("/api/v1/prompts/build", json={"method": "zero-shot"})
    assert response.status_code == 422


def test_validate_prompt(client):
    response = client.post(
        "/api/v1/prompts/validate",
        json={"templateId": "user-interview-guide", "variables": {"projectType": "Banking app"}},
    )
    assert response.status_code == 200
    assert response.json() == {"valid": False, "errors": ["Target User Group is required"]}


def test_detect_variables_with_preview(client):
    response = client.post(
        "/api/v1/prompts/variables",
        json={"template": "Interview {userGroup} about {topic}", "values": {"userGroup": "teens"}},
    )
    body = response.json()
    assert [v["id"] for v in body["variables"]] == ["userGroup", "topic"]
    assert body["variables"][0]["name"] == "User Group"
    assert body["preview"] == "Interview teens about {topic}"


def test_list_templates(client):
    response = client.get("/api/v1/prompts/templates")
    assert response.status_code == 200
    templates = response.json()
    assert len(templates) == 5
    assert templates[0]["variables"][0]["defaultValue"] is None
    assert client.get("/api/v1/prompts/templates/ideation-facilitator").json()["method"] == "chain-of-thought"


def test_enhance_prompt(client, invoker):
    invoker.invoke.return_value = {"enhancedPrompt": "Sharper prompt"}

    response = client.post(
        "/api/v1/prompts/enhance",
        json={"prompt": "Base", "framework": "design-thinking", "aiTool": "ChatGPT", "documentContent": "Notes"},
    )

    assert response.status_code == 200
    assert response.json()["enhancedPrompt"] == "Sharper prompt"
    name, payload = invoker.invoke.await_args.args
    assert name == "generate-enhanced-prompt"
    assert payload["prompt"] == "Base\n\nDocument Content:\nNotes"


def test_ai_response_error_maps_to_502(client, invoker):
    invoker.invoke.return_value = {"error": "quota exceeded"}
    response = client.post("/api/v1/prompts/enhance?respond=true", json={"prompt": "Base"})
    assert response.status_code == 502
    assert "quota exceeded" in response.json()["detail"]


def test_saved_prompts_are_owner_scoped(client):
    headers = {"X-User-Id": "api-test-owner"}
    created = client.post(
        "/api/v1/prompts/saved", json={"title": "Guide", "content": "Prompt", "method": "few-shot"}, headers=headers
    )
    assert created.status_code == 201
    prompt_id = created.json()["id"]

    listed = client.get("/api/v1/prompts/saved", headers=headers).json()
    assert [p["id"] for p in listed] == [prompt_id]
    assert client.get("/api/v1/prompts/saved", headers={"X-User-Id": "someone-else"}).json() == []

    assert client.delete(f"/api/v1/prompts/saved/{prompt_id}", headers=headers).status_code == 204
    assert client.delete(f"/api/v1/prompts/saved/{prompt_id}", headers=headers).status_code == 404


def test_saved_prompts_require_owner(client):
    assert client.get("/api/v1/prompts/saved").status_code == 401


def test_recommend_frameworks_defaults(client):
    response = client.post("/api/v1/recommendations/frameworks", json={})
    assert [(r["targetId"], r["confidence"]) for r in response.json()] == [
        ("design-thinking", 0.8),
        ("double-diamond", 0.7),
    ]


def test_recommend_next_stage(client):
    payload = {
        "workflow": {
            "id": "wf",
            "name": "Discovery",
            "frameworkType": "design-thinking",
            "stages": [{"id": "1", "frameworkStageId": "empathize", "order": 1, "isCompleted": True}],
        },
        "context": {"completedStages": ["define"], "userHistory": {"skillLevel": "beginner"}},
    }
    response = client.post("/api/v1/recommendations/next-stage", json=payload)
    body = response.json()
    assert [r["targetId"] for r in body] == ["ideate"]
    assert body[0]["estimatedImpact"] == "high"


def test_recommend_tools(client):
    response = client.post(
        "/api/v1/recommendations/tools",
        json={
            "stageId": "empathize",
            "frameworkType": "design-thinking",
            "context": {"userHistory": {"skillLevel": "beginner"}, "projectContext": {"timeline": "tight"}},
        },
    )
    assert response.json()[0]["targetId"] == "user-interviews"
    assert response.json()[0]["confidence"] == 1.0


def test_recommend_templates_and_methods(client):
    templates = client.post("/api/v1/recommendations/templates", json={"toolId": "user-interviews"}).json()
    assert templates[0]["targetId"] == "user-interview-guide"

    methods = client.post("/api/v1/recommendations/methods", json={"templateId": "x"}).json()
    assert len(methods) == 6


def test_recommend_from_artifacts(client):
    response = client.post(
        "/api/v1/recommendations/artifacts",
        json={"artifacts": [{"id": "a", "stageId": "empathize", "content": "User research notes"}]},
    )
    assert [r["targetId"] for r in response.json()] == ["prototype"]


def test_suggest_ai_tools(client):
    response = client.post(
        "/api/v1/recommendations/ai-tools",
        json={"framework": "design-thinking", "stage": "empathize", "uxTool": "User Interviews"},
    )
    assert response.json() == [
        {
            "name": "Miro AI",
            "description": "For collaborative empathy mapping and user research synthesis",
            "bestFor": ["Empathy Maps", "User Interviews", "Personas"],
        }
    ]


def test_catalog_endpoints(client):
    frameworks = client.get("/api/v1/catalog/frameworks").json()
    assert len(frameworks) == 9
    assert frameworks[0]["stages"][0]["tools"][0]["estimatedTime"] == "2-4 hours per interview"

    assert client.get("/api/v1/catalog/frameworks/lean-ux").json()["totalDuration"] == "Ongoing sprints"
    assert client.get("/api/v1/catalog/frameworks/nope").status_code == 404
    assert [t["id"] for t in client.get("/api/v1/catalog/tools", params={"q": "wireframe"}).json()] == ["wireframes"]


def test_process_text_document(client):
    response = client.post(
        "/api/v1/documents/process",
        files={"file": ("notes.txt", b"Interview notes", "text/plain")},
    )
    assert response.status_code == 200
    assert response.json() == {"documentContent": "Interview notes"}


def test_process_corrupt_pdf_is_400(client):
    response = client.post(
        "/api/v1/documents/process",
        files={"file": ("broken.pdf", b"not a pdf", "application/pdf")},
    )
    assert response.status_code == 400


def test_document_extraction_runs_off_the_event_loop(client, monkeypatch):
    offloaded = []

    async def fake_threadpool(func, *args):
        offloaded.append(func.__name__)
        return func(*args)

    monkeypatch.setattr(document_router, "run_in_threadpool", fake_threadpool)

    response = client.post(
        "/api/v1/documents/process",
        files={"file": ("brief.md", b"# Brief", "text/markdown")},
    )

    assert response.json() == {"documentContent": "# Brief"}
    assert offloaded == ["extract_text"]


def test_tool_detail(client):
    response = client.get("/api/v1/catalog/frameworks/design-thinking/stages/empathize/tools/user-interviews")
    assert response.status_code == 200
    assert response.json()["name"] == "User Interviews"

    missing = client.get("/api/v1/catalog/frameworks/design-thinking/stages/define/tools/user-interviews")
    assert missing.status_code == 404
