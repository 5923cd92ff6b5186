"""
JSON Schema контракты distribution_request / distribution_report

Схемы поставляются внутри пакета (schema/*.json) и читаются через
importlib.resources, поэтому валидация работает и после обычной
(не editable) установки.
"""

import json
from enum import Enum
from functools import lru_cache
from importlib.resources import files
from typing import Any

from jsonschema import Draft202012Validator, SchemaError, ValidationError

SCHEMA_PACKAGE_DIR = "schema"


class ContractName(str, Enum):
    """Контракты, поставляемые с пакетом"""

    DISTRIBUTION_REQUEST = "distribution_request"
    DISTRIBUTION_REPORT = "distribution_report"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Чтение схем с meta-validation и кэшем.

    root — каталог схем: pathlib.Path или Traversable из importlib.resources.
    По умолчанию — schema/ внутри этого пакета.
    """

    def __init__(self, root=None):
        if root is None:
            root = files(__package__).joinpath(SCHEMA_PACKAGE_DIR)
        self.root = root
        self._cache: dict[str, dict[str, Any]] = {}

    def load(self, name: str) -> dict[str, Any]:
        """
        Схема по имени без расширения.

        Raises:
            FileNotFoundError: в root нет <name>.json
            ValueError: файл не является валидной Draft 2020-12 схемой
        """
        if name in self._cache:
            return self._cache[name]

        resource = self.root.joinpath(f"{name}.json")
        if not resource.is_file():
            raise FileNotFoundError(f"Schema {name}.json not found in {self.root}")

        schema = json.loads(resource.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {name}.json: {e.message}") from e

        self._cache[name] = schema
        return schema


# =============================================================================
# CONTRACT VALIDATOR
# =============================================================================


class ContractValidator:
    """Проверка документа против одного контракта."""

    def __init__(self, contract: ContractName | str, loader: SchemaLoader | None = None):
        self.contract = ContractName(contract)
        self.schema = (loader or SchemaLoader()).load(self.contract.value)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: первое найденное нарушение
        """
        self._validator.validate(data)

    def is_valid(self, data: dict[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def errors(self, data: dict[str, Any]) -> list[ValidationError]:
        """Все нарушения, упорядоченные по JSON path."""
        return sorted(self._validator.iter_errors(data), key=lambda e: e.json_path)


@lru_cache(maxsize=None)
def get_validator(contract: ContractName) -> ContractValidator:
    """Валидатор для схемы из пакета (один экземпляр на контракт)."""
    return ContractValidator(contract)


def validate_distribution_request(data: dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: запрос не соответствует distribution_request
    """
    get_validator(ContractName.DISTRIBUTION_REQUEST).validate(data)


def validate_distribution_report(data: dict[str, Any]) -> None:
    """
    Проверка report.model_dump(mode="json").

    Raises:
        ValidationError: отчёт не соответствует distribution_report
    """
    get_validator(ContractName.DISTRIBUTION_REPORT).validate(data)
