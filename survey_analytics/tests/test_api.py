import pytest
from fastapi.testclient import TestClient

from survey_analytics.core.config import settings
from survey_analytics.main import app

client = TestClient(app)


# -------------------------------------
# 🩺 Health checks
# -------------------------------------
def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_liveness():
    assert client.get("/liveness").status_code == 204


def test_readiness_after_startup():
    with TestClient(app) as c:
        response = c.get("/readiness")
    assert response.status_code == 200
    assert response.json() == {"status": "ready"}


def test_security_headers():
    response = client.get("/health")
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"


def test_unknown_route_uses_error_envelope():
    response = client.get("/api/nope")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "HTTP_ERROR"


# -------------------------------------
# 💬 Sentiment
# -------------------------------------
def test_sentiment_batch():
    response = client.post(
        "/api/sentiment/", json={"texts": ["Ótimo produto!", "Não gostei"]}
    )
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "success"
    results = body["data"]["results"]
    assert [r["label"] for r in results] == ["positive", "negative"]
    assert body["data"]["summary"]["total"] == 2
    assert isinstance(body["data"]["insights"], list)


def test_sentiment_empty_batch():
    response = client.post("/api/sentiment/", json={"texts": []})
    assert response.status_code == 200
    assert response.json()["data"]["insights"] == ["Nenhuma resposta para analisar."]


def test_sentiment_rejects_wrong_type():
    response = client.post("/api/sentiment/", json={"texts": "not a list"})
    assert response.status_code == 422


def test_sentiment_batch_limit(monkeypatch):
    monkeypatch.setattr(settings, "MAX_TEXTS_PER_REQUEST", 1)
    response = client.post("/api/sentiment/", json={"texts": ["a", "b"]})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "TOO_MANY_TEXTS"


def test_thematic_batch():
    response = client.post(
        "/api/sentiment/thematic",
        json={"texts": ["Achei muito caro", "O preço é justo"]},
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert len(data["analyses"]) == 2
    price = data["summary"][0]
    assert price["theme"] == "price"
    assert price["theme_label"] == "Preço"
    assert price["total_responses"] == 2
    assert sum(price["sentiment_distribution"].values()) == 2


# -------------------------------------
# 📊 Analytics
# -------------------------------------
def test_statistics():
    response = client.post(
        "/api/analytics/statistics",
        json={"values": [1, 2, 3, 4, 100], "categories": ["a", "b", "a", "c", "a"]},
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["summary"]["median"] == 3
    assert data["summary"]["count"] == 5
    assert data["outliers"]["outliers"] == [100]
    assert data["categorical"]["most_frequent"] == "a"


def test_statistics_category_length_mismatch():
    response = client.post(
        "/api/analytics/statistics", json={"values": [1, 2], "categories": ["a"]}
    )
    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "CATEGORY_LENGTH_MISMATCH"
    assert error["field"] == "categories"


def test_correlation():
    response = client.post(
        "/api/analytics/correlation", json={"x": [1, 2, 3], "y": [2, 4, 6]}
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["coefficient"] == 1.0
    assert data["strength"] == "muito forte"


def test_correlation_length_mismatch():
    response = client.post(
        "/api/analytics/correlation", json={"x": [1, 2, 3], "y": [2, 4]}
    )
    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "LENGTH_MISMATCH"
    assert error["field"] == "y"


def test_hypothesis_test():
    response = client.post(
        "/api/analytics/hypothesis-test",
        json={"values": [1, 2, 3, 4, 5], "hypothesized_mean": 0},
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["sample_mean"] == 3
    assert data["hypothesized_mean"] == 0
    assert data["t_statistic"] == pytest.approx(4.2426, abs=1e-4)
    assert data["significant"] is True


def test_hypothesis_test_constant_sample_has_null_statistic():
    response = client.post(
        "/api/analytics/hypothesis-test",
        json={"values": [2, 2, 2], "hypothesized_mean": 1},
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["t_statistic"] is None
    assert data["p_value"] == 0
    assert data["significant"] is True


def test_hypothesis_test_rejects_nan():
    response = client.post(
        "/api/analytics/hypothesis-test",
        content='{"values": [1, NaN, 3]}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "NON_FINITE_VALUES"
    assert error["field"] == "values"


def test_anova():
    response = client.post(
        "/api/analytics/anova",
        json={"values": [1, 2, 3, 7, 8, 9], "categories": ["a", "a", "a", "b", "b", None]},
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["groups"] == 3
    assert data["group_means"] == {"a": 2.0, "b": 7.5, "undefined": 9.0}


def test_anova_category_length_mismatch():
    response = client.post(
        "/api/analytics/anova", json={"values": [1, 2, 3], "categories": ["a"]}
    )
    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "CATEGORY_LENGTH_MISMATCH"
    assert error["field"] == "categories"


def test_clustering():
    data = [[0, 0], [0.1, 0], [0, 0.1], [10, 10], [10.1, 10], [10, 10.1]]
    response = client.post(
        "/api/analytics/clustering", json={"data": data, "k": 2, "seed": 42}
    )
    assert response.status_code == 200
    body = response.json()["data"]
    result = body["result"]
    assert sorted(len(c) for c in result["clusters"]) == [3, 3]
    assert len(result["centroids"]) == 4
    assert result["summary"]["convergence_reached"] is True
    assert body["insights"][0].startswith("✅")


def test_clustering_empty_data():
    response = client.post("/api/analytics/clustering", json={"data": []})
    assert response.status_code == 200
    body = response.json()["data"]
    assert body["result"]["clusters"] == []
    assert body["insights"] == ["📊 Dados insuficientes para análise de clustering."]


def test_clustering_ragged_rows():
    response = client.post(
        "/api/analytics/clustering", json={"data": [[1, 2], [3]], "k": 2}
    )
    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "RAGGED_MATRIX"
    assert error["field"] == "data"


def test_clustering_rows_without_features():
    response = client.post("/api/analytics/clustering", json={"data": [[]]})
    assert response.status_code == 422
    assert response.json()["error"]["code"] == "EMPTY_ROWS"


def test_clustering_rejects_zero_k():
    response = client.post("/api/analytics/clustering", json={"data": [[1]], "k": 0})
    assert response.status_code == 422


def test_clustering_rejects_too_many_clusters():
    response = client.post(
        "/api/analytics/clustering",
        json={"data": [[1]], "k": settings.KMEANS_MAX_CLUSTERS + 1},
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "TOO_MANY_CLUSTERS"


def test_survey_analysis():
    responses = [
        {"id": "1", "text": "Atendimento excelente", "rating": 5},
        {"id": "2", "text": "Produto quebrou, péssimo", "rating": 1},
        {"id": "3", "answer_text": "Preço justo", "rating": 4},
    ]
    response = client.post(
        "/api/analytics/survey", json={"responses": responses, "k": 2, "seed": 1}
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["response_count"] == 3
    assert data["sentiment"]["summary"]["total"] == 3
    assert data["clustering"]["summary"]["total_clusters"] == 2
    assert set(data["insights"]) == {"sentiment", "clustering", "brand"}
