import contextlib
import json
from typing import Any, AnyStr

try:
    import orjson as _orjson

except ImportError:
    _orjson = None

try:
    import ujson as _ujson
except ImportError:
    _ujson = None


__all__ = [
    "dumps",
    "loads",
]


def dumps(obj: Any, *, ensure_ascii: bool = True, sort_keys: bool = False, **kwargs: Any) -> str:
    """
    Serialize ``obj`` to a JSON formatted ``str``.

    Parameters
    ----------
    obj : Any
        The object to serialize.
    ensure_ascii: bool, optional
        If ``True`` (default: ``True``), the output is guaranteed to have all incoming non-ASCII characters escaped.
        Ignored when orjson is used, as it always emits UTF-8.
    sort_keys: bool, optional
        If ``True`` (default: ``False``), then the output of dictionaries will be sorted by key.
    kwargs: Any, optional
        Additional keyword arguments are passed to ``json.dumps``.

    Returns
    -------
    str
        The JSON string representation of ``obj``.
    """
    if _orjson:
        with contextlib.suppress(_orjson.JSONEncodeError):
            return _orjson.dumps(obj, option=_orjson.OPT_SORT_KEYS if sort_keys else None).decode()
    if _ujson:
        return _ujson.dumps(obj, ensure_ascii=ensure_ascii, sort_keys=sort_keys, escape_forward_slashes=False)
    return json.dumps(obj, ensure_ascii=ensure_ascii, sort_keys=sort_keys, **kwargs)


def loads(obj: AnyStr | bytes | bytearray | memoryview | str, **kwargs: Any) -> Any:
    """Deserialize ``obj`` (a ``str``, ``bytes`` or ``bytearray`` instance containing a JSON document) to a Python object.

    Raises
    ------
    json.JSONDecodeError
        If the input is not valid JSON.
    """
    if _orjson:
        with contextlib.suppress(_orjson.JSONDecodeError):
            return _orjson.loads(obj)
    if _ujson:
        with contextlib.suppress(_ujson.JSONDecodeError):
            return _ujson.loads(obj)
    if isinstance(obj, memoryview):
        obj = obj.tobytes()
    return json.loads(obj, **kwargs)
