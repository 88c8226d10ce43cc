"""Action registry — an immutable name → definition mapping.

Built once at startup. Each action validates its input against a pydantic
model before its handler runs; handlers perform exactly one request.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Dict, Iterable, Iterator, List, Mapping, Type, Union

from pydantic import BaseModel
from pydantic import ValidationError as SchemaError

from investor_agent.domain.errors import ValidationError

Handler = Callable[[Any], Awaitable[Any]]


@dataclass(frozen=True)
class ActionDefinition:
    name: str
    description: str
    input_model: Type[BaseModel]
    handler: Handler

    def validate(self, arguments: Union[Mapping[str, Any], BaseModel]) -> BaseModel:
        """Return validated input or raise ValidationError."""
        if isinstance(arguments, self.input_model):
            return arguments
        if isinstance(arguments, BaseModel):
            arguments = arguments.model_dump()
        if not isinstance(arguments, Mapping):
            raise ValidationError(
                f"{self.name}: arguments must be a mapping, got {type(arguments).__name__}"
            )
        try:
            return self.input_model.model_validate(dict(arguments))
        except SchemaError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'input'}: {err['msg']}"
                for err in e.errors()
            )
            raise ValidationError(f"{self.name}: {problems}") from e


class ActionRegistry:
    """Read-only collection of actions, looked up by name."""

    def __init__(self, definitions: Iterable[ActionDefinition]):
        actions: Dict[str, ActionDefinition] = {}
        for definition in definitions:
            if definition.name in actions:
                raise ValueError(f"Duplicate action name: {definition.name!r}")
            actions[definition.name] = definition
        self._actions: Mapping[str, ActionDefinition] = MappingProxyType(actions)

    def __contains__(self, name: object) -> bool:
        return name in self._actions

    def __iter__(self) -> Iterator[ActionDefinition]:
        return iter(self._actions.values())

    def __len__(self) -> int:
        return len(self._actions)

    def names(self) -> List[str]:
        return list(self._actions)

    def get(self, name: str) -> ActionDefinition:
        try:
            return self._actions[name]
        except KeyError:
            raise ValidationError(f"Unknown action: {name!r}") from None

    async def invoke(
        self, name: str, arguments: Union[Mapping[str, Any], BaseModel]
    ) -> Any:
        """Validate arguments, then run the handler once.

        ValidationError is raised before any request is made; RemoteError
        propagates from the handler unchanged.
        """
        definition = self.get(name)
        validated = definition.validate(arguments)
        return await definition.handler(validated)
