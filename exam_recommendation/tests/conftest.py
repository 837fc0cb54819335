import pytest

from .factories import NOW, make_attempt, make_student, make_exam


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def physics_student():
    """One Physics attempt at 78 three days ago, weak in Organic Chemistry."""
    return make_student(
        history=[make_attempt("Physics", 78, days_ago=3, topics=["Mechanics"])],
        preferred=["Physics", "Chemistry"],
        weak=["Organic Chemistry"],
        strong=["Mechanics"],
        average=75,
    )


@pytest.fixture
def science_exams():
    return [
        make_exam("phy", "Physics", difficulty="Hard", duration=180, total_marks=300,
                  topics=["Mechanics"]),
        make_exam("chem", "Chemistry", difficulty="Medium", duration=120, total_marks=200,
                  topics=["Organic Chemistry"]),
        make_exam("math", "Mathematics", difficulty="Medium", duration=150, total_marks=250,
                  topics=["Calculus"]),
        make_exam("bio", "Biology", difficulty="Easy", duration=90, total_marks=150,
                  topics=["Genetics"]),
    ]
