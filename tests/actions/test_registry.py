"""Tests for ActionRegistry lookup and validation."""

import pytest

from investor_agent.actions.registry import ActionDefinition, ActionRegistry
from investor_agent.actions.schemas import SearchInput, TokenDataInput, TopPoolsInput
from investor_agent.domain.errors import RemoteError, ValidationError


def _definition(name="search", model=SearchInput, result="ok", error=None, calls=None):
    async def handler(args):
        if calls is not None:
            calls.append(args)
        if error:
            raise error
        return result

    return ActionDefinition(name=name, description=f"{name} action", input_model=model, handler=handler)


class TestConstruction:
    def test_names_in_order(self):
        registry = ActionRegistry([
            _definition("search"),
            _definition("get_top_pools", TopPoolsInput),
        ])
        assert registry.names() == ["search", "get_top_pools"]
        assert len(registry) == 2

    def test_duplicate_names_rejected(self):
        with pytest.raises(ValueError, match="Duplicate action name"):
            ActionRegistry([_definition("search"), _definition("search")])

    def test_contains(self):
        registry = ActionRegistry([_definition("search")])
        assert "search" in registry
        assert "swap" not in registry

    def test_mapping_is_read_only(self):
        registry = ActionRegistry([_definition("search")])
        with pytest.raises(TypeError):
            registry._actions["swap"] = _definition("swap")

    def test_unknown_action(self):
        registry = ActionRegistry([_definition("search")])
        with pytest.raises(ValidationError, match="Unknown action"):
            registry.get("swap")

    def test_definition_is_frozen(self):
        definition = _definition("search")
        with pytest.raises(Exception):
            definition.name = "other"


class TestInvoke:
    @pytest.mark.asyncio
    async def test_passes_validated_model_to_handler(self):
        calls = []
        registry = ActionRegistry([_definition("search", calls=calls, result={"hits": 1})])
        result = await registry.invoke("search", {"query": "  sol  "})
        assert result == {"hits": 1}
        assert isinstance(calls[0], SearchInput)
        assert calls[0].query == "sol"

    @pytest.mark.asyncio
    async def test_accepts_model_instance(self):
        calls = []
        registry = ActionRegistry([_definition("search", calls=calls)])
        await registry.invoke("search", SearchInput(query="bonk"))
        assert calls[0].query == "bonk"

    @pytest.mark.asyncio
    async def test_empty_query_rejected_before_handler(self):
        calls = []
        registry = ActionRegistry([_definition("search", calls=calls)])
        with pytest.raises(ValidationError, match="search: query"):
            await registry.invoke("search", {"query": ""})
        assert calls == []

    @pytest.mark.asyncio
    async def test_missing_field_rejected(self):
        registry = ActionRegistry([_definition("get_token_data", TokenDataInput)])
        with pytest.raises(ValidationError, match="tokenAddress"):
            await registry.invoke("get_token_data", {"network": "solana"})

    @pytest.mark.asyncio
    async def test_non_mapping_rejected(self):
        registry = ActionRegistry([_definition("search")])
        with pytest.raises(ValidationError, match="must be a mapping"):
            await registry.invoke("search", "sol")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("limit", [0, -1, -100])
    async def test_non_positive_limit_rejected(self, limit):
        calls = []
        registry = ActionRegistry([_definition("get_top_pools", TopPoolsInput, calls=calls)])
        with pytest.raises(ValidationError, match="limit"):
            await registry.invoke("get_top_pools", {"limit": limit})
        assert calls == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("limit", [True, "5", 2.5])
    async def test_non_integer_limit_rejected(self, limit):
        calls = []
        registry = ActionRegistry([_definition("get_top_pools", TopPoolsInput, calls=calls)])
        with pytest.raises(ValidationError, match="limit"):
            await registry.invoke("get_top_pools", {"limit": limit})
        assert calls == []

    @pytest.mark.asyncio
    async def test_remote_error_propagates(self):
        registry = ActionRegistry([_definition("search", error=RemoteError("HTTP 500"))])
        with pytest.raises(RemoteError, match="HTTP 500"):
            await registry.invoke("search", {"query": "sol"})

    @pytest.mark.asyncio
    async def test_handler_called_once(self):
        calls = []
        registry = ActionRegistry([_definition("search", calls=calls, error=RemoteError("x"))])
        with pytest.raises(RemoteError):
            await registry.invoke("search", {"query": "sol"})
        assert len(calls) == 1
