"""Tests for ProductAvailability listener fan-out."""

import pytest

from storefront.catalogue.availability import AvailabilityListener, ProductAvailability


class RecordingListener(AvailabilityListener):
    def __init__(self, name, journal):
        self.name = name
        self.journal = journal

    def on_availability_changed(self, product, available):
        self.journal.append((self.name, product.name, available))


class ExplodingListener(AvailabilityListener):
    def on_availability_changed(self, product, available):
        raise RuntimeError("listener failed")


class TestListenerRegistration:
    def test_starts_available_with_no_listeners(self, laptop):
        availability = ProductAvailability(laptop)
        assert availability.available is True
        assert availability.listeners == []

    def test_add_listener(self, laptop):
        availability = ProductAvailability(laptop)
        listener = RecordingListener("cart", [])
        availability.add_listener(listener)
        assert availability.listeners == [listener]

    def test_remove_listener(self, laptop):
        journal = []
        availability = ProductAvailability(laptop)
        listener = RecordingListener("cart", journal)
        availability.add_listener(listener)
        availability.remove_listener(listener)

        availability.set_availability(False)
        assert journal == []

    def test_remove_unknown_listener_is_noop(self, laptop):
        availability = ProductAvailability(laptop)
        availability.remove_listener(RecordingListener("cart", []))
        assert availability.listeners == []


class TestNotification:
    def test_listeners_notified_in_registration_order(self, laptop):
        journal = []
        availability = ProductAvailability(laptop)
        availability.add_listener(RecordingListener("cart", journal))
        availability.add_listener(RecordingListener("customer", journal))

        notified = availability.set_availability(False)

        assert notified == 2
        assert journal == [("cart", "Laptop", False), ("customer", "Laptop", False)]
        assert availability.available is False

    def test_no_notification_when_flag_unchanged(self, laptop):
        journal = []
        availability = ProductAvailability(laptop, available=True)
        availability.add_listener(RecordingListener("cart", journal))

        assert availability.set_availability(True) == 0
        assert journal == []

    def test_back_in_stock_notifies(self, laptop):
        journal = []
        availability = ProductAvailability(laptop, available=False)
        availability.add_listener(RecordingListener("cart", journal))

        availability.set_availability(True)
        assert journal == [("cart", "Laptop", True)]

    def test_no_listeners_still_updates_flag(self, laptop):
        availability = ProductAvailability(laptop)
        assert availability.set_availability(False) == 0
        assert availability.available is False

    def test_listener_error_propagates(self, laptop):
        availability = ProductAvailability(laptop)
        availability.add_listener(ExplodingListener())

        with pytest.raises(RuntimeError):
            availability.set_availability(False)

    def test_listener_interface_is_abstract(self):
        with pytest.raises(TypeError):
            AvailabilityListener()
