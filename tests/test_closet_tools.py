"""Closet tools, configuration and logging tests."""

from __future__ import annotations

import json
import logging
import random
import sys
from pathlib import Path
from typing import Dict, List

import pytest
from pydantic import ValidationError

sys.path.append(str(Path(__file__).resolve().parents[1]))

from closet_app.config import AppConfig
from closet_app.logging_config import JsonFormatter, log_event, redact_for_log, request_correlation
from logic.validation import OutfitMatchToolInput, validation_failure
from tools.closet_tools import ClosetTools
from tools.explanation import TemplateExplanationProvider


def _raw_closet() -> List[Dict[str, object]]:
    return [
        {"id": "dress1", "userId": "demo", "category": "dress", "colors": ["black"], "wearCount": 4, "price": 80},
        {"id": "shoes1", "userId": "demo", "category": "shoes", "colors": ["black"], "wearCount": 0},
        {"id": "broken", "userId": "demo", "category": "jeans", "wearCount": -2},
        {"id": "nameless", "userId": "demo"},
    ]


def _tools() -> ClosetTools:
    return ClosetTools(explanation_provider=TemplateExplanationProvider(rng=random.Random(5)))


def test_generate_outfit_matches_skips_invalid_documents():
    matches = _tools().generate_outfit_matches(items=_raw_closet(), occasion="party")
    assert len(matches) == 1
    match = matches[0]
    assert [item["item_id"] for item in match["outfit"]] == ["dress1", "shoes1"]
    assert match["confidence"] == pytest.approx(0.61)
    assert match["scores"] == {"color_score": 1.0, "trend_score": 0.0, "occasion_score": pytest.approx(0.7)}
    assert match["explanation"] is None


def test_generate_outfit_matches_with_explanations():
    matches = _tools().generate_outfit_matches(items=_raw_closet(), occasion="party", explain=True)
    assert "dress" in matches[0]["explanation"] or "black" in matches[0]["explanation"]


def test_generate_outfit_matches_validates_occasion():
    with pytest.raises(ValidationError):
        _tools().generate_outfit_matches(items=_raw_closet(), occasion="wedding")


def test_closet_analytics_and_sustainability():
    tools = _tools()
    analytics = tools.calculate_closet_analytics(items=_raw_closet())
    assert analytics["total_items"] == 2
    assert analytics["most_used_category"] == "dress"
    assert analytics["least_used_category"] == "shoes"
    assert analytics["average_wear_count"] == 2
    # usage 20 * 0.4 + utilization 50 * 0.3 + cost (100 - 20 * 2) * 0.3
    assert analytics["sustainability_score"] == 41
    assert tools.calculate_sustainability_score(items=_raw_closet()) == 41


def test_cost_per_wear_payload():
    result = _tools().calculate_cost_per_wear(item={"item_id": "coat1", "user_id": "demo", "category": "coat", "price": 100, "wear_count": 4})
    assert result == {"item_id": "coat1", "cost_per_wear": 25.0, "formatted": "$25.00"}


def test_config_reads_environment_file(tmp_path, monkeypatch):
    config_file = tmp_path / "staging.yaml"
    config_file.write_text(
        "# staging\nexplanation_backend: gemini\ngemini_model: 'gemini-1.5-flash'\nlog_level: debug\n"
    )
    monkeypatch.setenv("APP_ENV", "staging")
    monkeypatch.setenv("APP_CONFIG_PATH", str(config_file))
    monkeypatch.setenv("GOOGLE_API_KEY", "secret")
    monkeypatch.delenv("EXPLANATION_BACKEND", raising=False)
    monkeypatch.delenv("GEMINI_MODEL", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    config = AppConfig.from_env()
    assert config.environment == "staging"
    assert config.explanation_backend == "gemini"
    assert config.gemini_model == "gemini-1.5-flash"
    assert config.log_level == "DEBUG"
    assert config.api_key == "secret"


def test_config_environment_overrides_file(tmp_path, monkeypatch):
    config_file = tmp_path / "local.yaml"
    config_file.write_text("explanation_backend: gemini\n")
    monkeypatch.setenv("APP_CONFIG_PATH", str(config_file))
    monkeypatch.setenv("EXPLANATION_BACKEND", "template")
    assert AppConfig.from_env().explanation_backend == "template"


def test_config_rejects_unknown_backend():
    with pytest.raises(ValueError):
        AppConfig(explanation_backend="carrier-pigeon")


def test_redact_for_log_masks_owner_details():
    scrubbed = redact_for_log(
        {"user_id": "u1", "note": "contact jane@example.com", "image": "https://cdn.example.com/a.jpg", "count": 3}
    )
    assert scrubbed == {
        "user_id": "[redacted]",
        "note": "contact [redacted-email]",
        "image": "[redacted-url]",
        "count": 3,
    }


def test_log_event_emits_structured_json(caplog):
    logger = logging.getLogger("tests.closet_tools")
    with caplog.at_level(logging.INFO, logger="tests.closet_tools"):
        with request_correlation("corr-123"):
            log_event(logger, logging.INFO, "matches_ranked", occasion="party", user_id="u1")

    record = caplog.records[-1]
    assert record.event == "matches_ranked"
    assert record.correlation_id == "corr-123"
    assert record.user_id == "[redacted]"

    payload = json.loads(JsonFormatter().format(record))
    assert payload["event"] == "matches_ranked"
    assert payload["occasion"] == "party"
    assert payload["correlation_id"] == "corr-123"


def test_log_event_collapses_closet_items_to_labels(caplog):
    logger = logging.getLogger("tests.closet_tools")
    items = [
        {"item_id": "dress1", "user_id": "u1", "category": "dress", "image_url": "https://cdn/x.jpg"},
        {"id": "shoes1", "userId": "u1", "category": "shoes"},
    ]
    with caplog.at_level(logging.INFO, logger="tests.closet_tools"):
        log_event(logger, logging.INFO, "closet_received", items=items, price=120, item_id="dress1")

    record = caplog.records[-1]
    assert record.items == ["dress1:dress", "shoes1:shoes"]
    assert record.price == "[redacted]"
    assert record.item_id == "dress1"


def test_request_correlation_rejects_malformed_inbound_ids():
    with request_correlation("trace id with spaces") as correlation_id:
        assert len(correlation_id) == 32
    with request_correlation(" mobile-7f3a ") as correlation_id:
        assert correlation_id == "mobile-7f3a"


def test_config_file_ignores_unknown_keys(tmp_path, monkeypatch):
    config_file = tmp_path / "prod.yaml"
    config_file.write_text('project_id: legacy\ngemini_model: "gemini-1.5-pro"\nnot a setting\n')
    monkeypatch.setenv("APP_CONFIG_PATH", str(config_file))
    for name in ("EXPLANATION_BACKEND", "GEMINI_MODEL", "GOOGLE_API_KEY", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    config = AppConfig.from_env()
    assert config.gemini_model == "gemini-1.5-pro"
    assert config.explanation_backend == "template"
    assert not hasattr(config, "project_id")


def test_validation_failure_lists_field_locations_without_input_values():
    with pytest.raises(ValidationError) as excinfo:
        OutfitMatchToolInput.model_validate({"items": [], "occasion": "wedding", "season": "monsoon"})

    result = validation_failure("Invalid arguments", excinfo.value)
    assert result["status"] == "invalid"
    assert result["message"] == "Invalid arguments"
    assert {issue["location"] for issue in result["issues"]} == {"occasion", "season"}
    assert "wedding" not in str(result)


def test_tool_validation_failure_is_logged_with_issues(caplog):
    with caplog.at_level(logging.WARNING, logger="tools.observability"):
        with pytest.raises(ValidationError):
            _tools().generate_outfit_matches(items=_raw_closet(), occasion="wedding")

    record = next(r for r in caplog.records if getattr(r, "event", None) == "tool_validation_failed")
    assert record.tool == "generate_outfit_matches"
    assert [issue["location"] for issue in record.issues] == ["occasion"]
