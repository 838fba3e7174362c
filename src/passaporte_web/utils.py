import typing


class UnspecifiedType:
    """
    The type of :py:const:`UNSPECIFIED`, which stands for an attribute name that
    is taken from its key in ``Meta.attributes``.
    """

    _singleton: typing.ClassVar[typing.Optional["UnspecifiedType"]] = None

    def __bool__(self):
        return False

    def __repr__(self) -> str:
        return "UNSPECIFIED"

    def __new__(cls) -> "UnspecifiedType":
        if cls._singleton is None:
            cls._singleton = object.__new__(cls)
        return cls._singleton


UNSPECIFIED = UnspecifiedType()


def english_enumerate(items: typing.Iterable[str], conj: str = "and") -> str:
    words = list(items)
    if len(words) < 2:
        return "".join(words)
    elif len(words) == 2:
        return f"{words[0]} {conj} {words[1]}"
    return f"{', '.join(words[:-1])}, {conj} {words[-1]}"
