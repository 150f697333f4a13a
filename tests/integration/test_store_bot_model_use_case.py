"""
store_bot_model / simple_store_bot_model use-case tests
"""

from unittest.mock import AsyncMock

import pytest

from botcatalog.application.bot_models import (
    SimpleStoreBotModelInput,
    StoreBotModelInput,
    simple_store_bot_model,
    store_bot_model,
)
from botcatalog.application.ports import (
    BotModelStoredOutput,
    BotModelValidationFailedOutput,
    bot_model_stored_out_port,
    bot_model_validation_failed_out_port,
    store_bot_model_port,
)
from botcatalog.core.di import set_port_adapter
from botcatalog.core.errors import PortNotBoundError


@pytest.fixture
def ports():
    """Bind mock adapters to every bot-model port."""
    mocks = {
        "store": AsyncMock(return_value={"id": "test-id-123"}),
        "stored": AsyncMock(return_value=None),
        "validation_failed": AsyncMock(return_value=None),
    }
    set_port_adapter(store_bot_model_port, mocks["store"])
    set_port_adapter(bot_model_stored_out_port, mocks["stored"])
    set_port_adapter(bot_model_validation_failed_out_port, mocks["validation_failed"])
    return mocks


def failed_with(mock):
    mock.assert_awaited_once()
    (output,) = mock.await_args.args
    assert isinstance(output, BotModelValidationFailedOutput)
    assert output.operation == "storeBotModel"
    return output.errors


class TestStoreBotModel:
    @pytest.mark.asyncio
    async def test_stores_valid_input(self, ports, valid_input):
        result = await store_bot_model(valid_input)

        assert result is None
        ports["store"].assert_awaited_once()
        ports["stored"].assert_awaited_once_with(
            BotModelStoredOutput(id="test-id-123", name="Lead Qualification Bot", niche="Marketing Automation")
        )
        ports["validation_failed"].assert_not_awaited()

    @pytest.mark.asyncio
    async def test_store_receives_normalized_payload(self, ports, valid_input):
        minimal = {
            "name": "Bot",
            "description": "Desc",
            "slug": "bot",
            "niche": {"name": "Niche", "slug": "niche"},
            "technicalSpecification": {"platform": "Telegram"},
        }
        await store_bot_model(minimal)

        (payload,) = ports["store"].await_args.args
        assert isinstance(payload, StoreBotModelInput)
        assert payload.pricing_model == "one-time"
        assert payload.tags == []
        assert payload.target_audience is None
        assert payload.niche.is_active is True
        assert payload.niche.common_use_cases == []

    @pytest.mark.asyncio
    async def test_empty_name_reports_validation_failure(self, ports, valid_input):
        await store_bot_model(dict(valid_input, name=""))

        assert "Bot model name is required" in failed_with(ports["validation_failed"])
        ports["store"].assert_not_awaited()
        ports["stored"].assert_not_awaited()

    @pytest.mark.asyncio
    async def test_only_validation_port_needs_binding_for_invalid_input(self, valid_input):
        validation_failed = AsyncMock()
        set_port_adapter(bot_model_validation_failed_out_port, validation_failed)

        await store_bot_model(dict(valid_input, name=""))

        assert failed_with(validation_failed) == ["Bot model name is required"]

    @pytest.mark.asyncio
    async def test_missing_description(self, ports, valid_input):
        incomplete = {
            "name": "Test Bot",
            "slug": "test-bot",
            "niche": valid_input["niche"],
            "technicalSpecification": valid_input["technicalSpecification"],
        }
        await store_bot_model(incomplete)

        assert "Description is required" in failed_with(ports["validation_failed"])
        ports["store"].assert_not_awaited()

    @pytest.mark.asyncio
    async def test_niche_slug_format(self, ports, valid_input):
        bad = dict(valid_input, niche=dict(valid_input["niche"], slug="Invalid Slug With Spaces"))
        await store_bot_model(bad)

        assert "Niche slug must be lowercase with hyphens" in failed_with(ports["validation_failed"])

    @pytest.mark.asyncio
    async def test_bot_model_slug_format(self, ports, valid_input):
        await store_bot_model(dict(valid_input, slug="Invalid Slug With Spaces"))

        assert "Slug must be lowercase with hyphens" in failed_with(ports["validation_failed"])

    @pytest.mark.asyncio
    async def test_technical_specification_platform(self, ports, valid_input):
        bad = dict(
            valid_input,
            technicalSpecification=dict(valid_input["technicalSpecification"], platform=""),
        )
        await store_bot_model(bad)

        assert "Platform is required" in failed_with(ports["validation_failed"])

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "change",
        [
            lambda data: data.update(niche=dict(data["niche"], isActive="yes")),
            lambda data: data.update(
                technicalSpecification=dict(
                    data["technicalSpecification"], performanceMetrics={"responseTime": "100", "uptime": True}
                )
            ),
            lambda data: data.update(
                technicalSpecification=dict(data["technicalSpecification"], estimatedDevelopmentTime="40")
            ),
        ],
    )
    async def test_wrongly_typed_values_are_not_stored(self, ports, valid_input, change):
        change(valid_input)

        await store_bot_model(valid_input)

        assert failed_with(ports["validation_failed"])
        ports["store"].assert_not_awaited()
        ports["stored"].assert_not_awaited()

    @pytest.mark.asyncio
    async def test_collects_every_message(self, ports, valid_input):
        await store_bot_model(dict(valid_input, name="", description=""))

        assert failed_with(ports["validation_failed"]) == ["Bot model name is required", "Description is required"]

    @pytest.mark.asyncio
    async def test_store_errors_propagate_unchanged(self, ports, valid_input):
        error = RuntimeError("Database connection failed")
        ports["store"].side_effect = error

        with pytest.raises(RuntimeError, match="Database connection failed") as info:
            await store_bot_model(valid_input)

        assert info.value is error
        ports["stored"].assert_not_awaited()
        ports["validation_failed"].assert_not_awaited()

    @pytest.mark.asyncio
    async def test_success_port_errors_propagate(self, ports, valid_input):
        ports["stored"].side_effect = ValueError("notifier down")

        with pytest.raises(ValueError, match="notifier down"):
            await store_bot_model(valid_input)
        ports["validation_failed"].assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unbound_store_port_is_a_wiring_error(self, valid_input):
        set_port_adapter(bot_model_validation_failed_out_port, AsyncMock())

        with pytest.raises(PortNotBoundError, match="No implementation found for the port"):
            await store_bot_model(valid_input)

    @pytest.mark.asyncio
    async def test_unbound_success_port_fails_before_storing(self, valid_input):
        store = AsyncMock(return_value={"id": "x"})
        set_port_adapter(store_bot_model_port, store)

        with pytest.raises(PortNotBoundError):
            await store_bot_model(valid_input)
        store.assert_not_awaited()


class TestSimpleStoreBotModel:
    @pytest.mark.asyncio
    async def test_stores_valid_input(self, ports, valid_input):
        await simple_store_bot_model(valid_input)

        (payload,) = ports["store"].await_args.args
        assert isinstance(payload, SimpleStoreBotModelInput)
        assert payload.niche.name == "Marketing Automation"
        ports["stored"].assert_awaited_once_with(
            BotModelStoredOutput(id="test-id-123", name="Lead Qualification Bot", niche="Marketing Automation")
        )
        ports["validation_failed"].assert_not_awaited()

    @pytest.mark.asyncio
    async def test_reduced_schema_ignores_detailed_fields(self, ports, valid_input):
        bad_metrics = dict(
            valid_input,
            technicalSpecification={"platform": "Telegram", "performanceMetrics": {"uptime": 500}},
        )
        await simple_store_bot_model(bad_metrics)

        ports["store"].assert_awaited_once()
        ports["validation_failed"].assert_not_awaited()

    @pytest.mark.asyncio
    async def test_reports_validation_failure(self, ports, valid_input):
        await simple_store_bot_model(dict(valid_input, name=""))

        assert failed_with(ports["validation_failed"]) == ["Bot model name is required"]
        ports["store"].assert_not_awaited()

    @pytest.mark.asyncio
    async def test_store_errors_propagate(self, ports, valid_input):
        ports["store"].side_effect = RuntimeError("Database connection failed")

        with pytest.raises(RuntimeError, match="Database connection failed"):
            await simple_store_bot_model(valid_input)
        ports["stored"].assert_not_awaited()
