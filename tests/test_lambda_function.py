# tests/test_lambda_function.py
import json
from unittest.mock import AsyncMock, patch

import pytest

from alarm_notifier.adapters.slack_notifier import SlackNotifier
from alarm_notifier.errors import ConfigError, DecodeError, DeliveryError, DeliveryRejected
from alarm_notifier.lambda_function import lambda_handler

WEBHOOK_URL = "https://hooks.slack.com/services/T000/B000/XXXX"


# --- Helper ---------------------------------------------------------------

def make_event(alarm_name: str = "high-cpu") -> dict:
    message = {
        "AlarmName": alarm_name,
        "AlarmDescription": "CPU usage above 80%",
        "NewStateValue": "ALARM",
        "OldStateValue": "OK",
        "NewStateReason": "Threshold crossed",
        "Region": "us-east-1",
    }
    return {"Records": [{"Sns": {"Type": "Notification", "Message": json.dumps(message)}}]}


# --- 픽스처 ----------------------------------------------------------------

@pytest.fixture
def webhook_env(monkeypatch):
    monkeypatch.setenv("SLACK_WEBHOOK", WEBHOOK_URL)
    monkeypatch.delenv("SLACK_WEBHOOK_TIMEOUT", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)


@pytest.fixture(autouse=True)
def no_logging_setup():
    """lambda_handler 가 루트 핸들러를 갈아끼우지 않도록"""
    with patch("alarm_notifier.lambda_function.setup_logging"):
        yield


# --- 테스트들 ---------------------------------------------------------------

def test_successful_delivery(webhook_env):
    with patch.object(SlackNotifier, "send", new_callable=AsyncMock, return_value=200) as mock_send:
        response = lambda_handler(make_event(), None)

    assert response == {"statusCode": 200, "body": json.dumps("Notification has been sent")}
    mock_send.assert_awaited_once()
    message = mock_send.await_args.args[0]
    assert message.attachments[0].title == "ALARM: high-cpu"


def test_rejected_delivery_does_not_raise(webhook_env):
    """Slack 500 -> invocation 은 성공, statusCode 로 실패가 드러남"""
    with patch.object(
        SlackNotifier, "send", new_callable=AsyncMock, side_effect=DeliveryRejected(500, "oops")
    ):
        response = lambda_handler(make_event(), None)

    assert response["statusCode"] == 500
    assert "high-cpu" in json.loads(response["body"])


def test_missing_webhook_fails_before_delivery(monkeypatch):
    monkeypatch.delenv("SLACK_WEBHOOK", raising=False)

    with patch.object(SlackNotifier, "send", new_callable=AsyncMock) as mock_send:
        with pytest.raises(ConfigError):
            lambda_handler(make_event(), None)

    mock_send.assert_not_called()


def test_decode_error_fails_invocation(webhook_env):
    with patch.object(SlackNotifier, "send", new_callable=AsyncMock) as mock_send:
        with pytest.raises(DecodeError):
            lambda_handler({"Records": []}, None)

    assert mock_send.call_count == 0


def test_network_error_fails_invocation(webhook_env):
    with patch.object(
        SlackNotifier, "send", new_callable=AsyncMock, side_effect=DeliveryError("dns failure")
    ):
        with pytest.raises(DeliveryError):
            lambda_handler(make_event(), None)
