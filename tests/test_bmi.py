import pytest

from weightlog.domain.weight import InvalidArgumentError, bmi_category, bmi_result, calculate_bmi


def test_bmi_is_rounded_to_one_decimal() -> None:
    assert calculate_bmi(70, 175) == 22.9


@pytest.mark.parametrize(
    ("weight", "height"),
    [
        (None, 175),
        (70, None),
        (0, 175),
        (70, 0),
        (-70, 175),
        (float("nan"), 175),
        (float("inf"), 175),
        (70, float("inf")),
        (70, float("-inf")),
        (70, 1e-160),
    ],
)
def test_missing_or_invalid_inputs_give_none(weight, height) -> None:
    assert calculate_bmi(weight, height) is None


@pytest.mark.parametrize(
    ("bmi", "label", "severity"),
    [
        (16.0, "Underweight", "warning"),
        (18.4, "Underweight", "warning"),
        (18.5, "Healthy", "ok"),
        (24.9, "Healthy", "ok"),
        (25.0, "Overweight", "warning"),
        (29.9, "Overweight", "warning"),
        (30.0, "Obese", "danger"),
        (41.2, "Obese", "danger"),
    ],
)
def test_category_boundaries(bmi, label, severity) -> None:
    category = bmi_category(bmi)

    assert category.label == label
    assert category.severity == severity


@pytest.mark.parametrize("bmi", [None, 0, -3, float("nan"), float("inf")])
def test_no_category_without_a_valid_bmi(bmi) -> None:
    category = bmi_category(bmi)

    assert category.label == ""
    assert category.severity == ""


def test_bmi_result_combines_value_and_category() -> None:
    result = bmi_result(70, 175)

    assert result.bmi == 22.9
    assert result.category.label == "Healthy"


@pytest.mark.parametrize(("weight", "height"), [("70", 175), (70, True)])
def test_non_numeric_inputs_raise(weight, height) -> None:
    with pytest.raises(InvalidArgumentError):
        calculate_bmi(weight, height)
