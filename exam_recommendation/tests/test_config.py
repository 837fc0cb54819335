import pytest

from exam_recommendation.config import ConfigurationError, load_settings


def test_defaults_from_empty_environment():
    settings = load_settings({})
    assert settings.default_limit == 5
    assert settings.log_level == "INFO"
    assert settings.weights().model_dump() == {
        "subject_preference": 0.25,
        "performance_history": 0.30,
        "difficulty_progression": 0.20,
        "weak_area_improvement": 0.15,
        "recency": 0.10,
    }


def test_values_read_from_environment():
    settings = load_settings({
        "EXAM_REC_DEFAULT_LIMIT": "8",
        "EXAM_REC_LOG_LEVEL": "debug",
        "EXAM_REC_WEIGHTS": '{"recency": 0.2}',
    })
    assert settings.default_limit == 8
    assert settings.log_level == "DEBUG"
    assert settings.weights().recency == 0.2
    assert settings.weights().subject_preference == 0.25


@pytest.mark.parametrize("environ", [
    {"EXAM_REC_DEFAULT_LIMIT": "five"},
    {"EXAM_REC_WEIGHTS": "not json"},
    {"EXAM_REC_WEIGHTS": '["recency"]'},
    {"EXAM_REC_WEIGHTS": '{"popularity": 0.5}'},
    {"EXAM_REC_WEIGHTS": '{"recency": "high"}'},
])
def test_invalid_values_raise(environ):
    with pytest.raises(ConfigurationError):
        load_settings(environ)
