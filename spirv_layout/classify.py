from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Dict, Iterable, List, Mapping, Tuple, TypeVar

from . import model as t
from .passes import Collection, RawEntryPoint

logger = logging.getLogger(__name__)

V = TypeVar("V")


@dataclass(frozen=True)
class ClassifiedVariables:
    """Variables that made it into reflection output, keyed by variable id."""

    uniforms: Dict[int, t.UniformVariable]
    push_constants: Dict[int, t.PushConstantVariable]
    inputs: Dict[int, t.LocationVariable]
    outputs: Dict[int, t.LocationVariable]


def classify_variables(col: Collection) -> ClassifiedVariables:
    uniforms: Dict[int, t.UniformVariable] = {}
    push_constants: Dict[int, t.PushConstantVariable] = {}
    inputs: Dict[int, t.LocationVariable] = {}
    outputs: Dict[int, t.LocationVariable] = {}

    for var_id, var in col.variables.items():
        pointer = col.types.get(var.type_id)
        if not isinstance(pointer, t.Pointer):
            continue
        storage = pointer.storage_class
        pointed = pointer.pointed_type_id

        if storage is t.StorageClass.UNIFORM:
            if var.set is None or var.binding is None:
                logger.debug("dropping uniform %%%d: no set/binding", var_id)
                continue
            uniforms[var_id] = t.UniformVariable(
                set=var.set, binding=var.binding, type_id=pointed, name=var.name
            )
        elif storage is t.StorageClass.PUSH_CONSTANT:
            push_constants[var_id] = t.PushConstantVariable(
                type_id=pointed, name=var.name
            )
        elif storage in (t.StorageClass.INPUT, t.StorageClass.OUTPUT):
            if var.location is None:
                logger.debug("dropping %s %%%d: no location", storage.value, var_id)
                continue
            target = inputs if storage is t.StorageClass.INPUT else outputs
            target[var_id] = t.LocationVariable(
                location=var.location, type_id=pointed, name=var.name
            )

    return ClassifiedVariables(
        uniforms=uniforms,
        push_constants=push_constants,
        inputs=inputs,
        outputs=outputs,
    )


def _select(interface: Iterable[int], found: Mapping[int, V]) -> Tuple[V, ...]:
    return tuple(found[var_id] for var_id in interface if var_id in found)


def assemble_entry_points(
    entries: Iterable[RawEntryPoint], classified: ClassifiedVariables
) -> List[t.EntryPoint]:
    return [
        t.EntryPoint(
            name=entry.name,
            execution_model=entry.execution_model,
            uniforms=_select(entry.interface, classified.uniforms),
            push_constants=_select(entry.interface, classified.push_constants),
            inputs=_select(entry.interface, classified.inputs),
            outputs=_select(entry.interface, classified.outputs),
        )
        for entry in entries
    ]
