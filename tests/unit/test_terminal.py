"""Unit tests for Terminal request bodies."""

import pytest

from squarekit.api.terminal import (
    CreateTerminalCheckoutBody,
    CreateTerminalRefundBody,
    SearchTerminalCheckoutsBody,
    SearchTerminalRefundsBody,
)
from squarekit.core.builder import Builder
from squarekit.core.exceptions import BuildError
from squarekit.objects import (
    DeviceCheckoutOptions,
    SortOrder,
    TerminalCheckoutQuery,
    TerminalCheckoutStatus,
    TerminalRefundQuery,
    TimeRange,
)


class TestCreateTerminalCheckoutBody:
    """Tests for CreateTerminalCheckoutBody."""

    def test_device_options_sub_builder(self, usd):
        body = (
            Builder.from_body(CreateTerminalCheckoutBody())
            .amount_money(usd)
            .note("table 4")
            .sub_builder_from(DeviceCheckoutOptions())
            .device_id("DEVICE1")
            .skip_receipt_screen()
            .collect_signature()
            .into_parent_builder()
            .build()
        )

        options = body.checkout.device_options
        assert options.device_id == "DEVICE1"
        assert options.skip_receipt_screen is True
        assert options.show_itemized_cart is None
        assert body.idempotency_key

    def test_requires_device_options(self, usd):
        with pytest.raises(BuildError):
            Builder.from_body(CreateTerminalCheckoutBody()).amount_money(usd).build()

    def test_device_options_need_device_id(self, usd):
        with pytest.raises(BuildError):
            (
                Builder.from_body(CreateTerminalCheckoutBody())
                .amount_money(usd)
                .sub_builder_from(DeviceCheckoutOptions())
                .show_itemized_cart()
                .into_parent_builder()
            )


class TestSearchTerminalCheckoutsBody:
    """Tests for SearchTerminalCheckoutsBody."""

    def test_query_filter_created_on_demand(self):
        body = (
            Builder.from_body(SearchTerminalCheckoutsBody())
            .limit(10)
            .sub_builder_from(TerminalCheckoutQuery())
            .device_id("DEVICE1")
            .status(TerminalCheckoutStatus.COMPLETED)
            .created_at(TimeRange(start_at="2024-01-01T00:00:00Z"))
            .sort_descending()
            .into_parent_builder()
            .build()
        )

        assert body.to_payload() == {
            "limit": 10,
            "query": {
                "filter": {
                    "device_id": "DEVICE1",
                    "status": "COMPLETED",
                    "created_at": {"start_at": "2024-01-01T00:00:00Z"},
                },
                "sort": {"sort_order": "DESC"},
            },
        }


class TestTerminalRefunds:
    """Tests for refund bodies."""

    def test_create_refund_requires_all_fields(self, usd):
        with pytest.raises(BuildError):
            (
                Builder.from_body(CreateTerminalRefundBody())
                .amount_money(usd)
                .device_id("DEVICE1")
                .payment_id("P1")
                .build()
            )

    def test_create_refund(self, usd):
        body = (
            Builder.from_body(CreateTerminalRefundBody())
            .amount_money(usd)
            .device_id("DEVICE1")
            .payment_id("P1")
            .reason("damaged")
            .build()
        )

        assert body.refund.reason == "damaged"
        assert body.idempotency_key

    def test_status_shortcuts_overwrite(self):
        body = (
            Builder.from_body(SearchTerminalRefundsBody())
            .sub_builder_from(TerminalRefundQuery())
            .pending()
            .completed()
            .sort_ascending()
            .into_parent_builder()
            .build()
        )

        assert body.query.filter.status is TerminalCheckoutStatus.COMPLETED
        assert body.query.sort.sort_order is SortOrder.ASC
