"""Unit tests for record normalization."""

import pytest

from foodcourt.constants import DEFAULT_DRIVER_IMAGE_URL, PLACEHOLDER_IMAGE_URL
from foodcourt.models import AppSettings, Dish, DriverDetails, Order, UserData
from foodcourt.models._shared import children, parse_float


class TestParseFloat:
    """Tests for the lenient number parser."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (12, 12.0),
            (12.5, 12.5),
            ("12.50", 12.5),
            ("  7", 7.0),
            ("99 INR", 99.0),
            (".5", 0.5),
            ("-3.25", -3.25),
        ],
    )
    def test_parses_numbers(self, value, expected):
        assert parse_float(value) == expected

    @pytest.mark.parametrize("value", [None, "", "abc", True, [], {}, float("nan")])
    def test_unparsable_gives_default(self, value):
        assert parse_float(value, default=4.0) == 4.0


class TestChildren:
    def test_dict_node(self):
        assert children({"a": 1, "b": 2}) == [("a", 1), ("b", 2)]

    def test_list_node_skips_gaps(self):
        """Array-like nodes come back as lists with None holes."""
        assert children([None, {"x": 1}, None, {"y": 2}]) == [("1", {"x": 1}), ("3", {"y": 2})]

    def test_leaf_and_missing(self):
        assert children(None) == []
        assert children("leaf") == []


class TestDish:
    """Tests for Dish.from_raw normalization."""

    def test_structured_price_customer_price(self):
        """customerPrice is the final price with the discount taken off."""
        dish = Dish.from_raw(
            "d1",
            {"price": {"final": 200, "restaurantPrice": 180, "adminFee": 20}, "discount": 15},
        )
        assert dish.price.final == 200.0
        assert dish.price.restaurantPrice == 180.0
        assert dish.price.adminFee == 20.0
        assert dish.customerPrice == dish.price.final * (1 - dish.discount / 100)
        assert dish.customerPrice == pytest.approx(170.0)

    def test_scalar_price_is_structured(self):
        dish = Dish.from_raw("d1", {"price": "120.5"})
        assert dish.price.final == 120.5
        assert dish.price.restaurantPrice == 120.5
        assert dish.price.adminFee == 0.0
        assert dish.customerPrice == 120.5

    def test_missing_price_is_zero(self):
        dish = Dish.from_raw("d1", {"name": "Free sample"})
        assert dish.price.final == 0.0
        assert dish.customerPrice == 0.0

    def test_defaults(self):
        dish = Dish.from_raw("d1", {})
        assert dish.key == "d1"
        assert dish.categoryId == "uncategorized"
        assert dish.pincode == "ALL"
        assert dish.discount == 0.0
        assert dish.unit == "Unit N/A"
        assert dish.description == "No description available."
        assert dish.isInStock is True
        assert dish.images == [PLACEHOLDER_IMAGE_URL]

    def test_numeric_category_and_pincode_become_strings(self):
        dish = Dish.from_raw("d1", {"categoryId": 3, "pincode": 560001})
        assert dish.categoryId == "3"
        assert dish.pincode == "560001"

    def test_out_of_stock_kept(self):
        assert Dish.from_raw("d1", {"isInStock": False}).isInStock is False

    def test_images_fall_back_to_image_url(self):
        dish = Dish.from_raw("d1", {"imageUrl": "https://img/x.png", "images": []})
        assert dish.images == ["https://img/x.png"]

    def test_images_kept_when_present(self):
        dish = Dish.from_raw("d1", {"images": ["a.png", "b.png"], "imageUrl": "c.png"})
        assert dish.images == ["a.png", "b.png"]

    def test_extra_fields_kept(self):
        dish = Dish.from_raw("d1", {"restaurantId": "r9"})
        assert dish.model_dump()["restaurantId"] == "r9"

    def test_pincode_filter(self):
        everywhere = Dish.from_raw("d1", {"pincode": "ALL"})
        elsewhere = Dish.from_raw("d2", {"pincode": "560002"})
        local = Dish.from_raw("d3", {"pincode": "560001"})

        assert everywhere.is_available_in("560001")
        assert not elsewhere.is_available_in("560001")
        assert local.is_available_in("560001")
        assert elsewhere.is_available_in(None)
        assert elsewhere.is_available_in("")


class TestUserData:
    def test_fills_blanks(self):
        user = UserData.from_raw("u1", {"email": "a@b.c", "address": {"line": "12 MG Road"}})
        assert user.uid == "u1"
        assert user.name == "User Name"
        assert user.email == "a@b.c"
        assert user.mobile == ""
        assert user.address.line == "12 MG Road"
        assert user.address.state == ""
        assert user.profileImageUrl is None

    def test_missing_email_is_none(self):
        assert UserData.from_raw("u1", {"email": ""}).email is None


class TestAppSettings:
    def test_defaults_for_empty_node(self):
        settings = AppSettings.from_raw(None)
        assert settings.theme.customerThemeColor == "#673AB7"
        assert settings.delivery.deliveryFee == 10.0
        assert settings.delivery.freeDeliveryThreshold == 0.0

    def test_reads_stored_values(self):
        settings = AppSettings.from_raw(
            {
                "theme": {"customerThemeColor": "#FF5722"},
                "delivery": {"deliveryFee": "25", "freeDeliveryThreshold": 499},
            }
        )
        assert settings.theme.customerThemeColor == "#FF5722"
        assert settings.delivery.deliveryFee == 25.0
        assert settings.delivery.freeDeliveryThreshold == 499.0


class TestOrder:
    def test_mapped_status(self):
        order = Order.from_raw("o1", {"status": "Out for Delivery", "timestamp": 10})
        assert order.k == "o1"
        assert order.customerStatus == "On Way"

    def test_unmapped_status_is_processing(self):
        """Lowercase 'delivered' is not in the status table."""
        order = Order.from_raw("o1", {"status": "delivered"})
        assert order.customerStatus == "Processing"

    def test_missing_status_is_processing(self):
        assert Order.from_raw("o1", {}).customerStatus == "Processing"

    def test_items_drop_holes(self):
        order = Order.from_raw("o1", {"items": [None, {"key": "d1"}, None, {"key": "d2"}]})
        assert order.items == [{"key": "d1"}, {"key": "d2"}]

    def test_items_keyed_node(self):
        order = Order.from_raw("o1", {"items": {"a": {"key": "d1"}, "b": "junk"}})
        assert order.items == [{"key": "d1"}]

    def test_timestamp_coerced(self):
        assert Order.from_raw("o1", {"timestamp": "1700000000000"}).timestamp == 1700000000000
        assert Order.from_raw("o1", {}).timestamp == 0

    def test_needs_driver_details(self):
        on_way = Order.from_raw("o1", {"status": "Picked Up", "dboyId": "d1"})
        no_driver = Order.from_raw("o2", {"status": "Picked Up"})
        delivered = Order.from_raw("o3", {"status": "Delivered", "dboyId": "d1"})

        assert on_way.needs_driver_details
        assert not no_driver.needs_driver_details
        assert not delivered.needs_driver_details

    def test_to_record_drops_derived_fields(self):
        order = Order.from_raw("o1", {"userId": "u1", "status": "Pending", "total": 250})
        order = order.model_copy(update={"driverDetails": DriverDetails.simulated()})
        record = order.to_record()

        assert "k" not in record
        assert "customerStatus" not in record
        assert "driverDetails" not in record
        assert record["userId"] == "u1"
        assert record["total"] == 250


class TestDriverDetails:
    def test_from_profile(self):
        details = DriverDetails.from_raw({"name": "Asha", "mobile": "99999", "profileImageUrl": "p.png"})
        assert details == DriverDetails(name="Asha", mobile="99999", imageUrl="p.png")

    def test_default_image(self):
        assert DriverDetails.from_raw({"name": "Asha"}).imageUrl == DEFAULT_DRIVER_IMAGE_URL
