"""Codificação de parâmetros aninhados no formato form-urlencoded do Stripe.

    {"metadata": {"plan": "pro"}, "expand": ["data.product"]}
    -> metadata[plan]=pro&expand[0]=data.product

Regras:
- chaves de dicts viram segmentos entre colchetes (`b[a]`)
- elementos de listas/tuplas viram índices (`b[0]`, `b[1]`)
- None é omitido por completo (em listas, sem deixar buraco nos índices)
- bool vira "true"/"false"; demais escalares viram str()
- a ordem de emissão segue a ordem de iteração do mapping de entrada
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any
from urllib.parse import quote

ParamPairs = list[tuple[str, str]]

_SEGMENT_RE = re.compile(r"\[([^\[\]]*)\]")

# Caracteres que encodeURIComponent não escapa além de letras/dígitos/-_.~
_UNRESERVED_EXTRA = "!*'()"
_KEY_SAFE = "[]" + _UNRESERVED_EXTRA


class CyclicInputError(ValueError):
    """Estrutura de parâmetros referencia a si mesma."""


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _scalar_to_str(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def flatten_params(tree: Mapping[str, Any]) -> ParamPairs:
    """Achata a árvore em pares (chave, valor) ainda não percent-encoded.

    Raises:
        CyclicInputError: se um dict/lista aparece dentro de si mesmo.
    """
    pairs: ParamPairs = []
    _flatten_into(pairs, tree, prefix="", active=set())
    return pairs


def _flatten_into(pairs: ParamPairs, node: Any, prefix: str, active: set[int]) -> None:
    if isinstance(node, Mapping):
        items = [(str(key), value) for key, value in node.items()]
    else:
        # None sai antes de indexar para os índices ficarem contíguos
        present = [value for value in node if value is not None]
        items = [(str(index), value) for index, value in enumerate(present)]

    node_id = id(node)
    if node_id in active:
        raise CyclicInputError(f"Referência cíclica em '{prefix or '<root>'}'")
    active.add(node_id)
    try:
        for key, value in items:
            if value is None:
                continue
            full_key = f"{prefix}[{key}]" if prefix else key
            if isinstance(value, Mapping) or _is_sequence(value):
                _flatten_into(pairs, value, full_key, active)
            else:
                pairs.append((full_key, _scalar_to_str(value)))
    finally:
        active.discard(node_id)


def encode_params(tree: Mapping[str, Any]) -> str:
    """Serializa a árvore como corpo/query form-urlencoded.

    Colchetes das chaves ficam literais (aceitos pela API); valores são
    percent-encoded como encodeURIComponent.
    """
    return "&".join(
        f"{quote(key, safe=_KEY_SAFE)}={quote(value, safe=_UNRESERVED_EXTRA)}"
        for key, value in flatten_params(tree)
    )


def unflatten_params(pairs: Sequence[tuple[str, str]]) -> dict[str, Any]:
    """Reconstrói a árvore a partir dos pares achatados.

    Segmentos numéricos consecutivos a partir de 0 voltam a ser listas.
    Valores permanecem strings.
    """
    root: dict[str, Any] = {}
    for key, value in pairs:
        head, _, rest = key.partition("[")
        segments = [head, *_SEGMENT_RE.findall("[" + rest)] if rest else [head]
        node = root
        for segment in segments[:-1]:
            node = node.setdefault(segment, {})
        node[segments[-1]] = value
    return _lists_from_indexes(root)


def _lists_from_indexes(node: Any) -> Any:
    if not isinstance(node, dict):
        return node
    converted = {key: _lists_from_indexes(value) for key, value in node.items()}
    keys = list(converted)
    if keys and keys == [str(index) for index in range(len(keys))]:
        return [converted[key] for key in keys]
    return converted
