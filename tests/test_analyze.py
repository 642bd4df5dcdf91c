# tests/test_analyze.py

import json
import random

import pytest

from getfit.schemas.food import FoodItem
from getfit.services import meal_analyzer
from getfit.services.meal_analyzer import (
    EmptyModelResponse,
    InvalidModelResponse,
    calculate_calories,
    mock_analysis,
    parse_analysis,
    summarize_meal,
)

IMAGE = "data:image/jpeg;base64,/9j/4AAQSkZJRg=="


def test_missing_image(client):
    resp = client.post("/api/analyze", json={})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "No image provided"


def test_mock_mode_without_key(client):
    resp = client.post("/api/analyze", json={"image": IMAGE})
    assert resp.status_code == 200
    foods = resp.json()["foods"]
    assert 2 <= len(foods) <= 4
    labels = {f["label"] for f in meal_analyzer.MOCK_FOODS}
    for food in foods:
        assert food["label"] in labels
        assert food["confidence"] <= 0.99


def test_mock_analysis_jitter_is_bounded():
    rng = random.Random(7)
    base = {f["label"]: f["confidence"] for f in meal_analyzer.MOCK_FOODS}
    for _ in range(50):
        for food in mock_analysis(rng)["foods"]:
            assert abs(food["confidence"] - base[food["label"]]) <= 0.05 + 1e-9
            assert food["confidence"] <= 0.99


def test_real_mode_sends_image_to_vision_model(client, openai_key, monkeypatch):
    calls = []

    async def fake_chat_completion(messages, **kwargs):
        calls.append((messages, kwargs))
        return json.dumps({
            "foods": [
                {"label": "banana", "confidence": 0.9, "portion_guess": "medium", "calories_per_100g": 89},
                {"label": "mystery", "confidence": 1.7, "portion_guess": "huge", "calories_per_100g": -3},
            ]
        })

    monkeypatch.setattr(meal_analyzer, "chat_completion", fake_chat_completion)

    resp = client.post("/api/analyze", json={"image": IMAGE})
    assert resp.status_code == 200
    foods = resp.json()["foods"]
    assert foods[0] == {"label": "banana", "confidence": 0.9, "portion_guess": "medium", "calories_per_100g": 89.0}
    assert foods[1]["portion_guess"] == "unknown"
    assert foods[1]["confidence"] == 1.0
    assert foods[1]["calories_per_100g"] == 0.0

    messages, kwargs = calls[0]
    image_part = messages[1]["content"][0]
    assert image_part["image_url"] == {"url": IMAGE, "detail": "high"}
    assert kwargs["max_tokens"] == 1000


@pytest.mark.parametrize(
    "raw, detail",
    [
        ("", "No response from OpenAI"),
        ('{"items": []}', "Invalid response format from OpenAI"),
        ("not json", "Failed to analyze image"),
    ],
)
def test_real_mode_errors(client, openai_key, monkeypatch, raw, detail):
    async def fake_chat_completion(messages, **kwargs):
        return raw

    monkeypatch.setattr(meal_analyzer, "chat_completion", fake_chat_completion)
    resp = client.post("/api/analyze", json={"image": IMAGE})
    assert resp.status_code == 500
    assert resp.json()["detail"] == detail


def test_mock_mode_flag_wins_over_key(client, openai_key, monkeypatch):
    from getfit.core.config import settings

    async def boom(messages, **kwargs):
        raise AssertionError("OpenAI must not be called in mock mode")

    monkeypatch.setattr(settings, "mock_mode", True)
    monkeypatch.setattr(meal_analyzer, "chat_completion", boom)
    assert client.post("/api/analyze", json={"image": IMAGE}).status_code == 200


def test_parse_analysis_errors():
    with pytest.raises(EmptyModelResponse):
        parse_analysis("")
    with pytest.raises(InvalidModelResponse):
        parse_analysis('{"foods": "rice"}')


def test_bare_base64_becomes_data_url():
    assert meal_analyzer.to_image_url("abc") == "data:image/jpeg;base64,abc"
    assert meal_analyzer.to_image_url(IMAGE) == IMAGE


def test_calculate_calories_rounds_half_up():
    assert calculate_calories(150, 165) == 248  # 247.5
    assert calculate_calories(100, 0) == 0


def test_summary_defaults_grams_from_portion():
    foods = [
        FoodItem(label="rice", portion_guess="large", calories_per_100g=130),
        FoodItem(label="chicken", portion_guess="medium", calories_per_100g=165, grams=200),
        FoodItem(label="sauce", calories_per_100g=100),
    ]
    summary = summarize_meal(foods, daily_target=2000)
    assert [i.grams for i in summary.items] == [250, 200, 150]
    assert [i.calories for i in summary.items] == [325, 330, 150]
    assert summary.total_calories == 805
    assert summary.average_calories == 268
    assert summary.target_percentage == pytest.approx(40.25)
    assert sum(i.share for i in summary.items) == pytest.approx(100)


def test_summary_percentage_capped(client):
    resp = client.post(
        "/api/meals/summary",
        json={"foods": [{"label": "cake", "calories_per_100g": 400, "grams": 1000}]},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["total_calories"] == 4000
    assert data["daily_target"] == 2000
    assert data["target_percentage"] == 100


def test_summary_rejects_negative_values(client):
    resp = client.post(
        "/api/meals/summary",
        json={"foods": [{"label": "cake", "calories_per_100g": 400, "grams": -5}]},
    )
    assert resp.status_code == 422


def test_empty_summary(client):
    data = client.post("/api/meals/summary", json={"foods": []}).json()
    assert data["total_calories"] == 0
    assert data["average_calories"] == 0
    assert data["items"] == []
