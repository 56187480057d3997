"""Tests for the recipe builder."""

from uuid import uuid4

import pytest

from smart_pantry.domain.errors import ValidationRejectedError
from smart_pantry.domain.products import CALORIES_UNAVAILABLE
from smart_pantry.services.recipe_builder import RecipeBuilder
from tests.conftest import make_product


def test_total_calories_sums_contributions() -> None:
    builder = RecipeBuilder()
    builder.add_manual("Sugar", 200, 50)
    builder.add_manual("Milk", 80, 150)

    assert builder.total_calories() == pytest.approx(220)


def test_product_defaults_to_100g_and_amount_update() -> None:
    builder = RecipeBuilder()
    ingredient = builder.add_from_product(make_product(calories_per_100g=250))

    assert ingredient.amount_grams == 100
    assert builder.total_calories() == pytest.approx(250)

    builder.update_amount(ingredient.id, 40)

    assert builder.total_calories() == pytest.approx(100)


def test_unavailable_calories_count_as_zero() -> None:
    builder = RecipeBuilder()
    ingredient = builder.add_from_product(
        make_product(calories_per_100g=CALORIES_UNAVAILABLE)
    )

    assert ingredient.calories_per_100g == 0
    assert builder.total_calories() == 0


def test_same_name_twice_gets_distinct_ids() -> None:
    builder = RecipeBuilder()
    first = builder.add_manual("Flour", 364, 200)
    second = builder.add_manual("Flour", 364, 50)

    assert first.id != second.id
    assert len(builder.ingredients) == 2


def test_manual_entry_rejects_blank_name_and_bad_calories() -> None:
    builder = RecipeBuilder()

    with pytest.raises(ValidationRejectedError):
        builder.add_manual("   ", 100)
    with pytest.raises(ValidationRejectedError):
        builder.add_manual("Rice", "lots")
    with pytest.raises(ValidationRejectedError):
        builder.add_manual("Rice", None)

    assert builder.is_empty


@pytest.mark.parametrize("amount", [None, 0, -20, "", "abc"])
def test_manual_entry_defaults_amount(amount: object) -> None:
    builder = RecipeBuilder()
    ingredient = builder.add_manual("Rice", "130", amount)

    assert ingredient.amount_grams == 100
    assert ingredient.calories_per_100g == 130


def test_remove_and_unknown_ids_are_noops() -> None:
    builder = RecipeBuilder()
    keep = builder.add_manual("Rice", 130)
    drop = builder.add_manual("Beans", 340)

    builder.remove(drop.id)
    builder.remove(uuid4())
    builder.update_amount(uuid4(), 500)

    assert [item.id for item in builder.ingredients] == [keep.id]
    assert keep.amount_grams == 100


def test_total_is_recomputed_after_each_change() -> None:
    builder = RecipeBuilder()
    rice = builder.add_manual("Rice", 130)
    assert builder.total_calories() == pytest.approx(130)

    builder.update_amount(rice.id, 0)
    assert builder.total_calories() == 0

    builder.clear()
    assert builder.is_empty
    assert builder.total_calories() == 0


def test_snapshot_is_a_deep_copy() -> None:
    builder = RecipeBuilder()
    rice = builder.add_manual("Rice", 130)

    snapshot = builder.snapshot()
    builder.update_amount(rice.id, 10)

    assert snapshot[0].amount_grams == 100
    assert snapshot[0].id == rice.id
    assert snapshot[0] is not rice
