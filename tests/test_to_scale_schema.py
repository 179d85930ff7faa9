import pytest

from submarine.errors import SpanError
from submarine.rust_types.to_scale_schema import to_scale_schema
from submarine.rust_types.types import Array, Base, Tuple
from submarine.scale import schema as s


@pytest.mark.parametrize(
    "rust_type,expected",
    [
        (Base(["MyType"]), s.Ref("MyType")),
        (Base(["foo", "bar", "Baz"]), s.Ref("foo::bar::Baz")),
        (Base(["Vec"], [Base(["u8"])]), s.Vec(s.Ref("u8"))),
        (Base(["Option"], [Base(["String"])]), s.Option(s.Ref("String"))),
        (Array(Base(["u8"]), 32), s.Array(s.Ref("u8"), 32)),
        (Tuple(None), s.Tuple([])),
        (
            Tuple([Base(["u32"]), Base(["String"])]),
            s.Tuple([s.Ref("u32"), s.Ref("String")]),
        ),
        (
            Base(["Vec"], [Base(["Option"], [Base(["u64"])])]),
            s.Vec(s.Option(s.Ref("u64"))),
        ),
    ],
    ids=[
        "simple ref type",
        "module path ref type",
        "Vec type",
        "Option type",
        "Array type",
        "empty tuple",
        "tuple with fields",
        "nested Vec of Option",
    ],
)
def test_to_scale_schema(rust_type, expected):
    assert to_scale_schema(rust_type) == expected


@pytest.mark.parametrize(
    "rust_type",
    [
        None,
        Base(["Vec"], []),
        Base(["Option"], [Base(["u8"]), Base(["u16"])]),
        Base(["HashMap"], [Base(["String"]), Base(["u32"])]),
    ],
    ids=[
        "nil input",
        "Vec with wrong generic count",
        "Option with wrong generic count",
        "unsupported generic type",
    ],
)
def test_to_scale_schema_errors(rust_type):
    with pytest.raises(SpanError):
        to_scale_schema(rust_type)


def test_vec_error_path():
    with pytest.raises(SpanError) as info:
        to_scale_schema(Base(["Vec"], []))
    assert info.value.path == ["Vec", "generics_count=0"]


def test_nested_error_path_through_tuple_and_array():
    bad = Tuple([Base(["u8"]), Array(Base(["HashMap"], [Base(["u8"])]), 4)])
    with pytest.raises(SpanError) as info:
        to_scale_schema(bad)
    assert info.value.path[:2] == [1, "element"]


def test_nested_generic_param_path():
    with pytest.raises(SpanError) as info:
        to_scale_schema(Base(["Option"], [Base(["Vec"], [])]))
    assert info.value.path[:2] == ["Option", "generic_param"]


def test_unknown_kind_rejected():
    with pytest.raises(SpanError, match="unexpected rust type kind"):
        to_scale_schema("u8")