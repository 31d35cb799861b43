import pytest

from survey_analytics.core.thematic.attributor import (
    ThematicAttributor,
    analyze_thematic_sentiment,
    calculate_intensity_bonus,
    calculate_theme_score,
    determine_intensity,
    determine_sentiment,
    get_intensity_label,
    get_theme_label,
    identify_themes,
)
from survey_analytics.core.thematic.config import ThematicConfig


# -------------------------------------
# 🏷️ Theme detection
# -------------------------------------
def test_identify_single_theme():
    assert identify_themes("O atendimento foi ótimo") == ["service"]


def test_identify_multiple_themes_in_fixed_order():
    assert identify_themes("O preço é abusivo e o produto quebrou") == [
        "product",
        "price",
    ]


def test_identify_is_case_insensitive():
    assert identify_themes("PREÇO JUSTO") == ["price"]


def test_fallback_to_general():
    assert identify_themes("Gostei muito") == ["general"]
    assert identify_themes("") == ["general"]


# -------------------------------------
# 📐 Scores
# -------------------------------------
def test_theme_score_normalizes_by_largest_keyword_list():
    result = calculate_theme_score("Achei muito caro", "price")
    assert result.keywords == ["caro", "muito caro"]
    assert result.score == pytest.approx(-2 / 15)
    assert result.confidence == pytest.approx(2 / 3)


def test_theme_score_adds_phrase_bonus():
    result = calculate_theme_score("Atendimento excelente", "service")
    assert result.score == pytest.approx(1 / 18 + 0.5)


def test_general_score():
    result = calculate_theme_score("Gostei", "general")
    assert result.keywords == ["gostei"]
    assert result.score == pytest.approx(1 / 3)
    assert result.confidence == pytest.approx(0.5)


def test_theme_score_is_clamped():
    text = "péssimo horrível terrível inaceitável ridículo"
    assert calculate_theme_score(text, "product").score == pytest.approx(-1.0)


def test_unknown_theme_scores_zero():
    attributor = ThematicAttributor(theme_keywords={"service": {"positive": (), "negative": ()}})
    result = attributor.calculate_theme_score("qualquer coisa", "price")
    assert result.score == 0
    assert result.keywords == []


def test_intensity_bonus():
    assert calculate_intensity_bonus("foi excelente") == pytest.approx(0.5)
    assert calculate_intensity_bonus("foi horrível") == pytest.approx(-0.5)
    assert calculate_intensity_bonus("excelente mas horrível") == pytest.approx(0.0)
    assert calculate_intensity_bonus("excelente perfeito maravilhoso") == pytest.approx(1.0)


def test_custom_phrase_bonus():
    attributor = ThematicAttributor(ThematicConfig(phrase_bonus=0.25))
    assert attributor.calculate_intensity_bonus("excelente") == pytest.approx(0.25)


@pytest.mark.parametrize(
    "score,intensity",
    [
        (1.0, "muito_positivo"),
        (0.7, "muito_positivo"),
        (0.5, "positivo"),
        (0.3, "positivo"),
        (0.1, "levemente_positivo"),
        (0.0, "neutro"),
        (-0.1, "neutro"),
        (-0.3, "levemente_negativo"),
        (-0.5, "negativo"),
        (-0.7, "negativo"),
        (-0.71, "muito_negativo"),
    ],
)
def test_determine_intensity(score, intensity):
    assert determine_intensity(score) == intensity


# -------------------------------------
# 🧾 Full analysis
# -------------------------------------
def test_analyze_price_complaint():
    analysis = analyze_thematic_sentiment("Achei muito caro")
    assert [r.theme for r in analysis.results] == ["price"]
    result = analysis.results[0]
    assert result.sentiment == "negative"
    assert result.intensity == "levemente_negativo"
    assert analysis.overall_sentiment.score == pytest.approx(result.score)


def test_analyze_overall_is_mean_of_themes():
    analysis = analyze_thematic_sentiment("Atendimento excelente")
    assert [r.theme for r in analysis.results] == ["service", "product"]
    expected = ((1 / 18 + 0.5) + (1 / 16 + 0.5)) / 2
    assert analysis.overall_sentiment.score == pytest.approx(expected)
    assert analysis.overall_sentiment.intensity == "positivo"


def test_analyze_empty_text():
    analysis = analyze_thematic_sentiment("")
    assert len(analysis.results) == 1
    result = analysis.results[0]
    assert result.theme == "general"
    assert result.score == 0
    assert result.keywords == []
    assert result.confidence == 0
    assert analysis.overall_sentiment.sentiment == "neutral"


def test_display_labels():
    assert get_theme_label("price") == "Preço"
    assert get_theme_label("unknown") == "unknown"
    assert get_intensity_label("muito_negativo") == "Muito Negativo"


@pytest.mark.parametrize(
    "score,label", [(0.5, "positive"), (0.1, "neutral"), (-0.05, "neutral"), (-0.2, "negative")]
)
def test_determine_sentiment(score, label):
    assert determine_sentiment(score) == label
