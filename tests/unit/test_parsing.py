import json
from pathlib import Path

import pytest

from liftlog.utils.formatting import format_macros, format_number, format_percent, format_weight
from liftlog.utils.parsing import load_exercise_input, safe_float
from liftlog.utils.text import slugify, truncate_label


def test_load_exercise_input_yaml_mapping(tmp_path: Path) -> None:
    path = tmp_path / "exercises.yaml"
    path.write_text(
        """
Chest:
  - Bench Press
  - Incline Press
Back:
  - Deadlift
""".strip()
        + "\n"
    )
    rows = load_exercise_input(path)
    assert rows == [
        {"name": "Bench Press", "category": "Chest"},
        {"name": "Incline Press", "category": "Chest"},
        {"name": "Deadlift", "category": "Back"},
    ]


def test_load_exercise_input_json_list(tmp_path: Path) -> None:
    path = tmp_path / "exercises.json"
    path.write_text(json.dumps([{"name": "Squat", "category": "Quadriceps"}, "junk"]))
    assert load_exercise_input(path) == [{"name": "Squat", "category": "Quadriceps"}]


def test_load_exercise_input_single_object(tmp_path: Path) -> None:
    path = tmp_path / "one.yml"
    path.write_text("name: Curl\ncategory: Biceps\n")
    assert load_exercise_input(path) == [{"name": "Curl", "category": "Biceps"}]


def test_load_exercise_input_scalar_is_empty(tmp_path: Path) -> None:
    path = tmp_path / "empty.json"
    path.write_text("42")
    assert load_exercise_input(path) == []


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("12.5", 12.5), ("0", 0.0), ("", None), (None, None), ("abc", None), ("nan", None), ("inf", None)],
)
def test_safe_float(raw, expected) -> None:
    assert safe_float(raw) == expected


def test_slugify_and_truncate() -> None:
    assert slugify("Bench Press (Barbell)") == "bench-press-barbell"
    assert slugify("!!!") == "exercise"
    assert truncate_label("Bench") == "Bench"
    assert truncate_label("Bench Press") == "Bench …"


def test_number_formatting() -> None:
    assert format_number(100.0) == "100"
    assert format_number(102.4) == "102.4"
    assert format_number(None) == "-"
    assert format_weight(45, "kg") == "45 kg"
    assert format_weight(None, "kg") == "N/A"
    assert format_percent(10) == "+10.0%"
    assert format_percent(-2.5) == "-2.5%"
    assert format_macros(10.0, None, 54.5) == "Protein: 10g | Fat: 0g | Carbs: 54.5g"
