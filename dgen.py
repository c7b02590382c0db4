'''
dgen: schema-driven fake records for tests.

a schema is a dict of field -> spec, where spec is one of
    'word'                                   a faker provider name
    ('pyint', {'min_value': 1})              a faker provider with kwargs
    {'_provider': 'choice', 'from': [...]}   a uniform pick from a list
    {'_provider': 'literal', 'value': x}     a fixed value
    {...}                                    a nested record
    [{'_items': spec, '_count': (lo, hi)}]   a list of generated values
anything else is returned as-is.
'''

import numpy as np
from faker import Faker
from rhey import Container
from typing import Any, Dict, Optional


class Generator:
    """schema interpreter."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _call_faker(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        method = getattr(self._fake, method_name, None)
        if method is None:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict) -> Any:
        provider = config["_provider"]
        if provider == "choice":
            options = config["from"]
            # index rather than rng.choice so python values come back unconverted
            return options[int(self._rng.integers(0, len(options)))]
        if provider == "literal":
            if "value" not in config:
                raise ValueError("_provider 'literal' requires a 'value' key.")
            return config["value"]
        raise ValueError(f"unknown _provider: '{provider}'")

    def _count(self, item_schema: Any) -> int:
        count_config = item_schema.get("_count", 5) if isinstance(item_schema, dict) else 5
        if isinstance(count_config, (list, tuple)):
            low, high = count_config
            return int(self._rng.integers(low, high, endpoint=True))
        return count_config

    def create(self, schema: Any) -> Any:
        if isinstance(schema, dict):
            if "_provider" in schema:
                return self._resolve_provider(schema)
            return {k: self.create(v) for k, v in schema.items()}

        if isinstance(schema, list):
            if not schema:
                return []
            item_schema = schema[0]
            actual = item_schema.get("_items", item_schema) if isinstance(item_schema, dict) else item_schema
            return [self.create(actual) for _ in range(self._count(item_schema))]

        if isinstance(schema, str):
            # unknown names are literal strings
            return self._call_faker(schema) if hasattr(self._fake, schema) else schema

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._call_faker(schema[0], schema[1])

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> Container:
        return Container(*(self._generator.create(self._schema) for _ in range(count)))


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
