"""Unit tests for Orders request bodies."""

import pytest

from squarekit.api.orders import (
    CalculateOrderBody,
    CreateOrderBody,
    PayOrderBody,
    SearchOrdersBody,
    UpdateOrderBody,
)
from squarekit.core.builder import Builder, BuilderState
from squarekit.core.exceptions import BuildError
from squarekit.objects import (
    Order,
    OrderLineItem,
    OrderReward,
    OrderServiceCharge,
    OrderServiceChargeCalculationPhase,
    SearchOrdersQuery,
    SearchOrdersSortField,
    SortOrder,
)


class TestCreateOrderBody:
    """Tests for building CreateOrderBody."""

    def test_requires_location_id(self):
        with pytest.raises(BuildError):
            Builder.from_body(CreateOrderBody()).customer_id("C1").build()

    def test_build_stamps_idempotency_key(self):
        body = Builder.from_body(CreateOrderBody()).location_id("L1").build()

        assert body.order.location_id == "L1"
        assert body.idempotency_key

    def test_each_build_gets_a_new_key(self):
        """Test that two builds of equal bodies carry different keys."""
        first = Builder.from_body(CreateOrderBody()).location_id("L1").build()
        second = Builder.from_body(CreateOrderBody()).location_id("L1").build()

        assert first.idempotency_key != second.idempotency_key

    def test_service_charge_sub_builder(self, usd):
        """Test that a service charge built in a sub-builder lands on the order."""
        body = (
            Builder.from_body(CreateOrderBody())
            .location_id("L1")
            .sub_builder_from(OrderServiceCharge())
            .name("delivery")
            .amount_money(usd)
            .total_phase()
            .not_taxable()
            .into_parent_builder()
            .build()
        )

        charge = body.order.service_charges[0]
        assert charge.name == "delivery"
        assert charge.amount_money.amount == 300
        assert charge.calculation_phase is OrderServiceChargeCalculationPhase.TOTAL_PHASE
        assert charge.taxable is False

    def test_incomplete_service_charge_fails(self, usd):
        """Test that a service charge without a phase cannot be folded."""
        parent = Builder.from_body(CreateOrderBody()).location_id("L1")

        with pytest.raises(BuildError):
            (
                parent.sub_builder_from(OrderServiceCharge())
                .name("delivery")
                .amount_money(usd)
                .into_parent_builder()
            )
        assert parent.builder_state is BuilderState.CONSUMED

    def test_add_service_charge_directly(self, usd):
        charge = OrderServiceCharge(
            name="tip", amount_money=usd, calculation_phase="SUBTOTAL_PHASE"
        )
        body = (
            Builder.from_body(CreateOrderBody())
            .location_id("L1")
            .add_service_charge(charge)
            .add_service_charge(charge)
            .build()
        )

        assert len(body.order.service_charges) == 2

    def test_payload_omits_unset_fields(self):
        payload = Builder.from_body(CreateOrderBody()).location_id("L1").build().to_payload()

        assert payload["order"] == {"location_id": "L1"}
        assert set(payload) == {"idempotency_key", "order"}


class TestSearchOrdersBody:
    """Tests for building SearchOrdersBody."""

    def test_return_entries_defaults_to_true(self):
        body = Builder.from_body(SearchOrdersBody()).add_location_id("L1").build()

        assert body.return_entries is True

    def test_no_return_entries_is_kept(self):
        body = Builder.from_body(SearchOrdersBody()).no_return_entries().build()

        assert body.return_entries is False

    def test_location_ids_accumulate(self):
        body = (
            Builder.from_body(SearchOrdersBody())
            .add_location_id("L1")
            .add_location_id("L2")
            .limit(10)
            .build()
        )

        assert body.location_ids == ["L1", "L2"]
        assert body.limit == 10

    def test_query_sub_builder_sorts_by_created_at(self):
        """Test that sort_descending without a field defaults to CREATED_AT."""
        body = (
            Builder.from_body(SearchOrdersBody())
            .sub_builder_from(SearchOrdersQuery())
            .sort_descending()
            .into_parent_builder()
            .build()
        )

        assert body.query.sort.sort_field is SearchOrdersSortField.CREATED_AT
        assert body.query.sort.sort_order is SortOrder.DESC

    def test_sort_field_keeps_order(self):
        query = (
            Builder.from_body(SearchOrdersQuery())
            .sort_ascending()
            .sort_field(SearchOrdersSortField.CLOSED_AT)
            .build()
        )

        assert query.sort.sort_field is SearchOrdersSortField.CLOSED_AT
        assert query.sort.sort_order is SortOrder.ASC


class TestUpdateAndCalculate:
    """Tests for update, pay and calculate bodies."""

    def test_update_requires_order(self):
        with pytest.raises(BuildError):
            Builder.from_body(UpdateOrderBody()).fields_to_clear(["note"]).build()

    def test_update_with_order_sub_builder(self):
        body = (
            Builder.from_body(UpdateOrderBody())
            .sub_builder_from(Order())
            .location_id("L1")
            .version(3)
            .into_parent_builder()
            .build()
        )

        assert body.order.version == 3
        assert body.idempotency_key

    def test_order_requires_version(self):
        parent = Builder.from_body(UpdateOrderBody())

        with pytest.raises(BuildError):
            parent.sub_builder_from(Order()).location_id("L1").into_parent_builder()

    def test_nested_line_item_in_order(self):
        """Test three levels: line item into order into update body."""
        body = (
            Builder.from_body(UpdateOrderBody())
            .sub_builder_from(Order())
            .location_id("L1")
            .version(1)
            .sub_builder_from(OrderLineItem())
            .quantity("2")
            .name("latte")
            .into_parent_builder()
            .into_parent_builder()
            .build()
        )

        assert body.order.line_items[0].quantity == "2"

    def test_pay_requires_version_and_payments(self):
        with pytest.raises(BuildError):
            Builder.from_body(PayOrderBody()).order_version(1).build()

        body = (
            Builder.from_body(PayOrderBody())
            .order_version(1)
            .add_payment_id("P1")
            .build()
        )
        assert body.payment_ids == ["P1"]
        assert body.idempotency_key

    def test_calculate_with_rewards(self):
        body = (
            Builder.from_body(CalculateOrderBody())
            .order(Order(location_id="L1"))
            .sub_builder_from(OrderReward())
            .id("R1")
            .reward_tier_id("T1")
            .into_parent_builder()
            .build()
        )

        assert body.proposed_rewards == [OrderReward(id="R1", reward_tier_id="T1")]

    def test_calculate_requires_order(self):
        with pytest.raises(BuildError):
            Builder.from_body(CalculateOrderBody()).build()
