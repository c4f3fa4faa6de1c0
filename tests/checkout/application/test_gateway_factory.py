"""Tests for gateway and adapter registries."""

import pytest
from checkout.config import PaymentConfigError
from checkout.gateway import get_gateway, reset_gateway, set_gateway
from checkout.gateway.fake_adapter import FakeGateway
from checkout.gateway.payway_adapter import PayWayGateway
from checkout.notification import get_email_sender, reset_email_sender
from checkout.notification.fake_email import FakeEmailAdapter


class TestGatewayFactory:
    def test_get_gateway_returns_fake_by_default(self, monkeypatch):
        monkeypatch.delenv("GATEWAY_ADAPTER", raising=False)
        reset_gateway()
        assert isinstance(get_gateway(), FakeGateway)

    def test_set_gateway_overrides(self):
        custom = FakeGateway()
        custom.configure(should_approve=False)
        set_gateway(custom)
        assert get_gateway().should_approve is False

    def test_reset_gateway(self):
        custom = FakeGateway()
        custom.configure(should_approve=False)
        set_gateway(custom)
        reset_gateway()
        assert get_gateway().should_approve is True

    def test_payway_selected_from_environment(self, monkeypatch):
        monkeypatch.setenv("GATEWAY_ADAPTER", "payway")
        monkeypatch.setenv("PAYWAY_API_KEY", "T10000_SEC_abc")
        monkeypatch.setenv("PAYWAY_MERCHANT_ID", "TEST")
        reset_gateway()
        gateway = get_gateway()
        assert isinstance(gateway, PayWayGateway)
        assert gateway.config.merchant_id == "TEST"

    def test_payway_without_credentials_rejected(self, monkeypatch):
        monkeypatch.setenv("GATEWAY_ADAPTER", "payway")
        monkeypatch.delenv("PAYWAY_API_KEY", raising=False)
        monkeypatch.delenv("PAYWAY_MERCHANT_ID", raising=False)
        reset_gateway()
        with pytest.raises(PaymentConfigError):
            get_gateway()

    def test_unknown_adapter_rejected(self, monkeypatch):
        monkeypatch.setenv("GATEWAY_ADAPTER", "carrier-pigeon")
        reset_gateway()
        with pytest.raises(ValueError):
            get_gateway()


class TestEmailFactory:
    def test_default_is_fake(self, monkeypatch):
        monkeypatch.delenv("EMAIL_ADAPTER", raising=False)
        reset_email_sender()
        assert isinstance(get_email_sender(), FakeEmailAdapter)

    def test_unknown_adapter_rejected(self, monkeypatch):
        monkeypatch.setenv("EMAIL_ADAPTER", "pager")
        reset_email_sender()
        with pytest.raises(ValueError):
            get_email_sender()
