from enum import Enum
from functools import lru_cache
from typing import Any, ClassVar, Dict, Iterable, List, Optional, Type

from exceptions.custom_errors import ValueRangeError


class PlanningVariable:
    """
    Descriptor for the one field of an entity that the search is allowed to mutate.

    When `value_range` is an Enum class the value is checked on assignment. List
    based ranges live on the solution and are checked by `PlanningSolution.validate`.
    """

    def __init__(self, value_range: Optional[Type[Enum]] = None, nullable: bool = True):
        self.value_range = value_range
        self.nullable = nullable
        self.name = None

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return instance.__dict__.get(self.name)

    def __set__(self, instance, value):
        if value is None:
            if not self.nullable:
                raise ValueRangeError(
                    f"Planning variable {type(instance).__name__}.{self.name} is not nullable."
                )
        elif self.value_range is not None and not isinstance(value, self.value_range):
            raise ValueRangeError(
                f"Value {value!r} of {type(instance).__name__}.{self.name} "
                f"is not a {self.value_range.__name__}."
            )
        instance.__dict__[self.name] = value


@lru_cache(maxsize=None)
def planning_variables(entity_class: type) -> Dict[str, PlanningVariable]:
    """Return the planning variables declared on an entity class, by attribute name."""
    found = {}
    for klass in reversed(entity_class.__mro__):
        for name, attr in vars(klass).items():
            if isinstance(attr, PlanningVariable):
                found[name] = attr
    return found


class PlanningSolution:
    """
    Data root owning the entity collection and the current score.

    Subclasses name their entity list in `entity_collection` and map every
    list based planning variable to the attribute holding its values in
    `value_range_providers`.
    """

    entity_collection: ClassVar[str] = "entities"
    value_range_providers: ClassVar[Dict[str, str]] = {}

    def __init__(self):
        self.score = None

    def get_entities(self) -> List[Any]:
        return getattr(self, self.entity_collection)

    def get_value_range(self, entity: Any, variable_name: str) -> Iterable[Any]:
        if variable_name in self.value_range_providers:
            return getattr(self, self.value_range_providers[variable_name])
        variable = planning_variables(type(entity))[variable_name]
        if variable.value_range is not None:
            return list(variable.value_range)
        raise ValueRangeError(
            f"No value range declared for {type(entity).__name__}.{variable_name}."
        )

    def count_uninitialized(self) -> int:
        count = 0
        for entity in self.get_entities():
            for name in planning_variables(type(entity)):
                if getattr(entity, name) is None:
                    count += 1
        return count

    def validate(self) -> None:
        """Check every assigned planning variable against its value range."""
        for entity in self.get_entities():
            for name in planning_variables(type(entity)):
                value = getattr(entity, name)
                if value is None:
                    continue
                if not any(value is candidate for candidate in self.get_value_range(entity, name)):
                    raise ValueRangeError(
                        f"Value {value!r} of {entity!r}.{name} is not in its value range."
                    )
