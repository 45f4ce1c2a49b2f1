"""Interpreter for JSON Patch documents targeting the movie update shape."""
import copy
from typing import Any

from pydantic import ValidationError

from filmes_api.core.exceptions import MalformedPatchError
from filmes_api.schemas.patch import PatchField, PatchOp, PatchOperation


def parse_op(raw: str) -> PatchOp:
    try:
        return PatchOp(raw.lower())
    except ValueError:
        raise MalformedPatchError(f"The op '{raw}' is not supported")


def parse_path(raw: str) -> PatchField:
    if not raw or not raw.startswith("/"):
        raise MalformedPatchError(f"The path '{raw}' is not a valid JSON pointer")
    segment = raw[1:]
    try:
        return PatchField(segment.lower())
    except ValueError:
        raise MalformedPatchError(f"The target location specified by path '{raw}' was not found")


def parse_operations(raw: Any) -> list[PatchOperation]:
    if not isinstance(raw, list):
        raise MalformedPatchError("A patch document must be a JSON array of operations")
    operations = []
    for index, item in enumerate(raw):
        try:
            operations.append(PatchOperation.model_validate(item))
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in error['loc']) or 'operation'}: {error['msg']}" for error in e.errors())
            raise MalformedPatchError(f"Operation {index} is malformed: {problems}")
    return operations


def apply_patch(document: dict[str, Any], operations: Any) -> dict[str, Any]:
    """Apply `operations` in order to a copy of `document` and return it.

    `operations` is the raw patch document; each entry is checked as it is parsed.

    Removing a field leaves it as None; the caller re-validates the result.
    """
    target = copy.deepcopy(document)
    for operation in parse_operations(operations):
        op = parse_op(operation.op)
        field = parse_path(operation.path).value
        has_value = "value" in operation.model_fields_set

        if op in (PatchOp.ADD, PatchOp.REPLACE):
            if not has_value:
                raise MalformedPatchError(f"The '{op.value}' operation at path '{operation.path}' requires a value")
            target[field] = operation.value
        elif op is PatchOp.REMOVE:
            target[field] = None
        elif op in (PatchOp.COPY, PatchOp.MOVE):
            if operation.from_ is None:
                raise MalformedPatchError(f"The '{op.value}' operation at path '{operation.path}' requires 'from'")
            source = parse_path(operation.from_).value
            value = target[source]
            if op is PatchOp.MOVE and source != field:
                target[source] = None
            target[field] = value
        elif op is PatchOp.TEST:
            if not has_value:
                raise MalformedPatchError(f"The 'test' operation at path '{operation.path}' requires a value")
            if target[field] != operation.value:
                raise MalformedPatchError(
                    f"The current value '{target[field]}' at path '{operation.path}' is not equal to the test value '{operation.value}'")
    return target
