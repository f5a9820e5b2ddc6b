"""Unit tests for the Variant entity."""

import pytest

from cubepos.domain.exceptions import ValidationError
from cubepos.domain.model.value_objects import Money
from cubepos.domain.model.variant import StockStatus, Variant


def _variant(stock=10, threshold=5):
    return Variant.create(
        id="1", product_id="p1", sku="TEE-M-BLK",
        price=Money.of("20"), stock=stock, low_stock_threshold=threshold,
    )


class TestVariantCreate:

    def test_sku_is_stripped(self):
        v = Variant.create(id="1", product_id="p1", sku="  TEE-M  ", price=Money.of("1"), stock=0)
        assert v.sku == "TEE-M"

    def test_blank_sku_rejected(self):
        with pytest.raises(ValidationError, match="SKU is required"):
            Variant.create(id="1", product_id="p1", sku="  ", price=Money.of("1"), stock=0)

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _variant(stock=-1)

    def test_non_integer_stock_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            _variant(stock=1.5)

    def test_bool_stock_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            _variant(stock=True)

    def test_negative_threshold_rejected(self):
        with pytest.raises(ValidationError, match="threshold"):
            _variant(threshold=-1)


class TestVariantUpdate:

    def test_price_change_reported(self):
        v = _variant()
        assert v.update(price=Money.of("18")) is True
        assert v.price == Money.of("18")

    def test_stock_change_reported(self):
        v = _variant()
        assert v.update(stock=3) is True
        assert v.stock == 3

    def test_same_values_are_not_a_change(self):
        v = _variant()
        assert v.update(price=Money.of("20.00"), stock=10) is False

    def test_nothing_given_is_not_a_change(self):
        assert _variant().update() is False

    def test_negative_stock_rejected(self):
        v = _variant()
        with pytest.raises(ValidationError, match="cannot be negative"):
            v.update(stock=-2)
        assert v.stock == 10

    def test_rejected_update_leaves_price_untouched(self):
        v = _variant()
        with pytest.raises(ValidationError, match="cannot be negative"):
            v.update(price=Money.of("5"), stock=-1)
        assert v.price == Money.of("20")
        assert v.stock == 10


class TestStockStatus:

    def test_zero_is_out(self):
        assert _variant(stock=0).stock_status == StockStatus.OUT

    def test_at_threshold_is_low(self):
        assert _variant(stock=5, threshold=5).stock_status == StockStatus.LOW

    def test_above_threshold_is_normal(self):
        assert _variant(stock=6, threshold=5).stock_status == StockStatus.NORMAL
