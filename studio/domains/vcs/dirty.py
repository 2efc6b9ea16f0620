from typing import Any, Callable, Optional

EqualityPredicate = Callable[[Any, Any], bool]


def normalize(value: Any) -> Any:
    """Приведение значения к чистому JSON-виду для структурного сравнения"""
    if hasattr(value, "model_dump"):
        return normalize(value.model_dump(mode="json"))
    if hasattr(value, "to_dict"):
        return normalize(value.to_dict())
    if isinstance(value, dict):
        return {str(key): normalize(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [normalize(item) for item in value]
    return value


def deep_equal(left: Any, right: Any) -> bool:
    """Полное структурное равенство двух снимков (не по ссылке)"""
    return normalize(left) == normalize(right)


def is_dirty(working: Any, head: Any, equals: Optional[EqualityPredicate] = None) -> bool:
    """Есть ли у рабочего снимка изменения относительно HEAD.

    Без HEAD: грязно, если рабочий снимок передан; без рабочего снимка
    сравнивать не с чем, и состояние считается чистым.
    """
    if head is None:
        return working is not None
    if working is None:
        return False

    equals = equals or deep_equal
    return not equals(working, head)
