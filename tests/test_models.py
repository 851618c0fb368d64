"""
Tests for request and response models
"""
from datetime import date
from decimal import Decimal

import pytest

from multisafepay import (
    Account,
    CartItem,
    Creditcard,
    CustomerDetails,
    GatewayCode,
    Ideal,
    Meta,
    Money,
    OrderRequest,
    OrderStatus,
    OrderType,
    PaymentOptions,
    RefundRequest,
    RequestBody,
    ShoppingCart,
    StrictModeError,
    Transaction,
    ValidationError,
)
from multisafepay.models.value_objects import Gender


def _card(**overrides):
    fields = dict(
        card_number="4111 1111 1111 1111",
        card_holder_name="Jan Jansen",
        card_expiry_date="12/30",
        cvc="123",
    )
    fields.update(overrides)
    return Creditcard(**fields)


class TestMoney:
    def test_minor_units(self):
        assert Money.of("20.00", "eur").minor_units == 2000
        assert Money.of("0.205", "EUR").minor_units == 21
        assert Money.of(500, "JPY").minor_units == 500

    def test_from_minor_units(self):
        money = Money.from_minor_units(1999, "EUR")
        assert money.amount == Decimal("19.99")
        assert money.currency == "EUR"
        assert str(money) == "19.99 EUR"

    def test_invalid_currency(self):
        with pytest.raises(ValidationError):
            Money.of("1.00", "EURO")

    def test_invalid_amount(self):
        with pytest.raises(ValidationError) as exc_info:
            Money.of("abc", "EUR")
        assert exc_info.value.field == "amount"


class TestCreditcard:
    def test_serialization(self):
        data = _card(flexible_3d=True).get_data()

        assert data == {
            "card_number": "4111111111111111",
            "card_holder_name": "Jan Jansen",
            "card_expiry_date": "1230",
            "cvc": "123",
            "card_cvc": "123",
            "flexible_3d": True,
        }

    def test_expiry_date_from_date(self):
        assert _card(card_expiry_date=date(2031, 3, 1)).card_expiry_date == "0331"

    def test_rejects_luhn_failure(self):
        with pytest.raises(ValidationError):
            _card(card_number="4111111111111112")

    @pytest.mark.parametrize("cvc", ["12", "12345", "abc"])
    def test_rejects_bad_cvc(self, cvc):
        with pytest.raises(ValidationError):
            _card(cvc=cvc)

    def test_rejects_bad_expiry(self):
        with pytest.raises(ValidationError):
            _card(card_expiry_date="someday")

    def test_compatibility_tables(self):
        assert Creditcard.supports("VISA", "direct")
        assert not Creditcard.supports("VISA", "redirect")
        assert not Creditcard.supports("IDEAL", "direct")
        assert Creditcard.supports("CREDITCARD", "direct")
        assert not Creditcard.supports("MASTERCARD", "direct")
        assert not Creditcard.supports("AMEX", "direct")


class TestOtherGatewayInfo:
    def test_ideal(self):
        assert Ideal(issuer_id="0031").get_data() == {"issuer_id": "0031"}
        assert Ideal.supports("IDEAL", "redirect")

    def test_account_validates_iban(self):
        account = Account(
            account_id="nl91 abna 0417 1643 00",
            account_holder_name="Jan Jansen",
            account_holder_iban="NL91ABNA0417164300",
        )
        assert account.account_id == "NL91ABNA0417164300"

        with pytest.raises(ValidationError):
            Account(
                account_id="NL91ABNA0417164301",
                account_holder_name="Jan Jansen",
                account_holder_iban="NL91ABNA0417164301",
            )

    def test_meta(self):
        meta = Meta(birthday=date(1980, 1, 31), email="jan@example.com", gender=Gender.MR, phone="0201234567")
        assert meta.get_data() == {
            "birthday": "1980-01-31",
            "email": "jan@example.com",
            "gender": "mr",
            "phone": "0201234567",
        }


class TestOrderRequest:
    def test_money_expands_to_amount_and_currency(self):
        order = OrderRequest(order_id="1001", money=Money.of("20.00", "EUR"), gateway=GatewayCode.IDEAL)

        data = order.get_data()

        assert data["amount"] == 2000
        assert data["currency"] == "EUR"
        assert data["gateway"] == "IDEAL"
        assert data["type"] == "redirect"
        assert order.money == Money.of("20.00", "EUR")

    def test_nested_arguments_serialize(self):
        order = OrderRequest(
            order_id="1001",
            amount=2000,
            currency="eur",
            gateway="ideal",
            gateway_info=Ideal(issuer_id="0031"),
            payment_options=PaymentOptions(
                notification_url="https://shop.example/notify",
                redirect_url="https://shop.example/ok",
            ),
            customer=CustomerDetails(first_name="Jan", country="nl", email="jan@example.com"),
            shopping_cart=ShoppingCart(items=[CartItem(name="Book", unit_price=Decimal("10.00"), quantity=2)]),
        )

        data = order.get_data()

        assert data["currency"] == "EUR"
        assert data["gateway"] == "IDEAL"
        assert data["gateway_info"] == {"issuer_id": "0031"}
        assert data["payment_options"] == {
            "notification_url": "https://shop.example/notify",
            "redirect_url": "https://shop.example/ok",
        }
        assert data["customer"] == {"first_name": "Jan", "country": "NL", "email": "jan@example.com"}
        assert data["shopping_cart"] == {"items": [{"name": "Book", "unit_price": 10.0, "quantity": 2}]}

    def test_subclass_gateway_info_keeps_its_fields(self):
        order = OrderRequest(
            type=OrderType.DIRECT,
            order_id="1001",
            amount=100,
            currency="EUR",
            gateway="VISA",
            gateway_info=_card(),
        )
        assert order.get_data()["gateway_info"]["card_number"] == "4111111111111111"

    def test_incompatible_gateway_info(self):
        with pytest.raises(ValidationError) as exc_info:
            OrderRequest(order_id="1", amount=100, currency="EUR", gateway="IDEAL", gateway_info=_card())
        assert exc_info.value.field == "gateway_info"

    def test_incompatible_order_type(self):
        with pytest.raises(ValidationError):
            OrderRequest(
                type=OrderType.REDIRECT,
                order_id="1",
                amount=100,
                currency="EUR",
                gateway="VISA",
                gateway_info=_card(),
            )

    def test_direct_order_requires_gateway(self):
        with pytest.raises(ValidationError):
            OrderRequest(type="direct", order_id="1", amount=100, currency="EUR")

    def test_negative_amount(self):
        with pytest.raises(ValidationError):
            OrderRequest(order_id="1", amount=-1, currency="EUR")


class TestStrictMode:
    def test_lenient_body_keeps_extra_fields(self):
        order = OrderRequest(order_id="1", amount=100, currency="EUR")
        order.add_data({"google_analytics": {"account": "UA-1"}})

        assert order.get_data()["google_analytics"] == {"account": "UA-1"}

    def test_strict_body_rejects_extra_fields(self):
        order = OrderRequest(order_id="1", amount=100, currency="EUR", unknown_field=True)
        order.set_strict_mode(True)

        with pytest.raises(StrictModeError) as exc_info:
            order.get_data()
        assert exc_info.value.fields == ["unknown_field"]

    def test_strict_mode_inspects_nested_bodies(self):
        order = OrderRequest(
            order_id="1",
            amount=100,
            currency="EUR",
            payment_options=PaymentOptions(redirect_url="https://x.example", bogus=1),
        ).set_strict_mode(True)

        with pytest.raises(StrictModeError) as exc_info:
            order.get_data()
        assert exc_info.value.fields == ["payment_options.bogus"]

    def test_declared_fields_pass_strict_mode(self):
        body = OrderRequest(order_id="1", amount=100, currency="EUR").set_strict_mode(True)
        body.add_data({"description": "set later"})

        assert body.get_data()["description"] == "set later"

    def test_generic_body_with_strict_mode(self):
        assert RequestBody().set_strict_mode(True).get_data() == {}


class TestRefundRequest:
    def test_fields_are_exact(self):
        body = RefundRequest.from_money(Money.of("5.00", "EUR"), "Damaged")
        assert body.get_data() == {"amount": 500, "currency": "EUR", "description": "Damaged"}

    def test_empty_description_is_sent(self):
        body = RefundRequest.from_money(Money.of("5.00", "EUR"))
        assert body.get_data() == {"amount": 500, "currency": "EUR", "description": ""}


class TestTransaction:
    def test_parse_full_order(self, mock_responses):
        transaction = Transaction.model_validate(mock_responses["order"])

        assert transaction.order_id == "order-1001"
        assert transaction.is_status(OrderStatus.COMPLETED)
        assert transaction.money == Money.of("20.00", "EUR")
        assert transaction.payment_details.issuer_id == "0031"
        assert transaction.extra == {"fastcheckout": "NO"}

    def test_numeric_order_id(self):
        assert Transaction.model_validate({"order_id": 12345}).order_id == "12345"

    def test_money_absent(self):
        assert Transaction.model_validate({"order_id": "1"}).money is None
