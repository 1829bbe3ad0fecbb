import pytest

from my_garden.shared.core.exceptions import PlantNotFoundError, ValidationError
from my_garden.shared.core.result import Result
from my_garden.shared.utils.validators import (
    validate_image_payload,
    validate_plant_description,
    validate_plant_name,
    validate_watering_frequency,
)


@pytest.mark.parametrize("name, valid", [("Fern", True), ("", False), ("   ", False), ("x" * 101, False)])
def test_plant_name(name, valid):
    assert validate_plant_name(name).is_valid is valid


def test_description_may_be_empty_but_bounded():
    assert validate_plant_description("").is_valid
    assert not validate_plant_description("x" * 501).is_valid


@pytest.mark.parametrize("days, valid", [(1, True), (30, True), (0, False), (31, False), (True, False), (2.5, False)])
def test_watering_frequency(days, valid):
    assert validate_watering_frequency(days).is_valid is valid


def test_image_payload():
    assert not validate_image_payload(b"", 10).is_valid
    assert not validate_image_payload(b"x" * 11, 10).is_valid
    assert validate_image_payload(b"x" * 10, 10).is_valid


def test_validation_error_from_pydantic_errors():
    error = ValidationError.from_errors(
        [{"loc": ("body", "watering_frequency_days"), "msg": "too big", "type": "less_than_equal"}]
    )

    assert error.status_code == 422
    assert error.details["field"] == "watering_frequency_days"
    assert error.to_dict()["error"]["details"]["errors"][0]["message"] == "too big"


def test_result_unwrap():
    assert Result.ok(3).unwrap() == 3
    with pytest.raises(PlantNotFoundError):
        Result.fail(PlantNotFoundError("p1")).unwrap()
    assert not Result.fail(PlantNotFoundError("p1"))
