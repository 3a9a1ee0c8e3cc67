"""Garment keyword classification."""

import pytest

from wardrobe_app.reco.classifier import categories_for, in_category


@pytest.mark.parametrize(
    "cloth_type, category",
    [
        ("Oxford Shirt", "top"),
        ("hoodie", "top"),
        ("slim jeans", "bottom"),
        ("Pleated Skirt", "bottom"),
        ("wool coat", "outerwear"),
        ("Blazer", "outerwear"),
        ("running sneakers", "footwear"),
        ("ankle boots", "footwear"),
        ("leather belt", "accessory"),
        ("WATCH", "accessory"),
    ],
)
def test_label_matches_its_category(cloth_type, category):
    assert in_category(cloth_type, category)
    assert category in categories_for(cloth_type)


def test_membership_is_not_exclusive():
    # "t-shirt" and "shirt" are both top keywords; "jacket" adds outerwear
    assert categories_for("shirt jacket") == {"top", "outerwear"}
    assert categories_for("tote bag with scarf") == {"accessory"}


def test_unmatched_label_has_no_category():
    assert categories_for("dress") == set()
    assert categories_for("") == set()
    assert categories_for(None) == set()
    assert not in_category("kimono", "top")
