import pytest

from perfkit.jsonnode import JsonType, Node


def num(value):
    node = Node(type=JsonType.NUMBER)
    node.set_number(value)
    return node


def string(value):
    return Node(type=JsonType.STRING, value_string=value)


def array_of(*values):
    arr = Node(type=JsonType.ARRAY)
    for value in values:
        arr.append(num(value))
    return arr


def test_len_and_iter_follow_appends():
    arr = array_of(1, 2, 3)
    assert len(arr) == 3
    assert [child.value_double for child in arr] == [1.0, 2.0, 3.0]


def test_getitem_in_range_and_errors():
    arr = array_of(10, 20)
    assert arr[1].value_int == 20
    with pytest.raises(IndexError):
        arr[2]
    with pytest.raises(IndexError):
        arr[-1]


def test_get_item_case_insensitive_by_default():
    obj = Node(type=JsonType.OBJECT)
    obj.add("Speed", num(5))
    assert obj.get_item("speed") is obj[0]
    assert obj.get_item("speed", case_sensitive=True) is None
    assert obj.get_item("Speed", case_sensitive=True) is obj[0]


def test_get_item_returns_first_match():
    obj = Node(type=JsonType.OBJECT)
    first, second = num(1), num(2)
    obj.add("k", first)
    obj.add("K", second)
    assert obj.get_item("k") is first
    assert obj.get_item("K", case_sensitive=True) is second


def test_has_item():
    obj = Node(type=JsonType.OBJECT)
    obj.add("a", num(1))
    assert obj.has_item("A") is True
    assert obj.has_item("b") is False


def test_add_sets_name():
    obj = Node(type=JsonType.OBJECT)
    item = string("x")
    obj.add("key", item)
    assert item.name == "key"
    assert obj[0] is item


def test_reference_shares_children_and_has_no_name():
    original = array_of(1)
    original.name = "orig"
    holder = Node(type=JsonType.ARRAY)
    ref = holder.append_reference(original)
    assert ref.is_reference is True
    assert ref.name is None
    assert ref.type == original.type
    original.append(num(2))
    assert len(ref) == 2
    assert holder[0] is ref


def test_add_reference_names_reference():
    original = string("v")
    obj = Node(type=JsonType.OBJECT)
    ref = obj.add_reference("r", original)
    assert ref.name == "r"
    assert original.name is None
    assert ref.value_string == "v"


def test_detach_by_identity():
    arr = array_of(1, 2, 3)
    middle = arr[1]
    assert arr.detach(middle) is middle
    assert [c.value_int for c in arr] == [1, 3]
    with pytest.raises(ValueError):
        arr.detach(middle)


def test_detach_index():
    arr = array_of(1, 2)
    first = arr[0]
    assert arr.detach_index(0) is first
    assert len(arr) == 1
    with pytest.raises(IndexError):
        arr.detach_index(5)
    with pytest.raises(IndexError):
        arr.detach_index(-1)


def test_detach_name_and_missing():
    obj = Node(type=JsonType.OBJECT)
    item = num(1)
    obj.add("Name", item)
    with pytest.raises(KeyError):
        obj.detach_name("name", case_sensitive=True)
    assert obj.detach_name("name") is item
    assert len(obj) == 0


def test_remove_index_and_name():
    obj = Node(type=JsonType.OBJECT)
    obj.add("a", num(1))
    obj.add("b", num(2))
    obj.remove_index(0)
    assert [c.name for c in obj] == ["b"]
    obj.remove_name("B")
    assert len(obj) == 0
    with pytest.raises(KeyError):
        obj.remove_name("b")


def test_insert_positions():
    arr = array_of(1, 3)
    arr.insert(1, num(2))
    arr.insert(0, num(0))
    arr.insert(100, num(4))
    assert [c.value_int for c in arr] == [0, 1, 2, 3, 4]
    with pytest.raises(IndexError):
        arr.insert(-1, num(9))


def test_replace_keeps_order():
    arr = array_of(1, 2, 3)
    old = arr[1]
    new = num(7)
    arr.replace(old, new)
    assert arr[1] is new
    assert len(arr) == 3
    arr.replace(new, new)
    assert arr[1] is new
    with pytest.raises(ValueError):
        arr.replace(old, num(8))


def test_replace_index_and_name():
    obj = Node(type=JsonType.OBJECT)
    obj.add("a", num(1))
    obj.add("b", num(2))
    repl = string("s")
    repl.name = "b"
    obj.replace_name("B", repl)
    assert obj.get_item("b") is repl
    other = num(5)
    obj.replace_index(0, other)
    assert obj[0] is other
    with pytest.raises(KeyError):
        obj.replace_name("zz", num(0))
    with pytest.raises(IndexError):
        obj.replace_index(9, num(0))


def test_set_number_truncates_and_returns():
    node = Node(type=JsonType.NUMBER)
    assert node.set_number(3.75) == 3.75
    assert node.value_int == 3
    node.set_number(-3.75)
    assert node.value_int == -3


def test_set_number_saturates():
    node = Node(type=JsonType.NUMBER)
    node.set_number(1e30)
    assert node.value_int == 9223372036854775807
    node.set_number(-1e30)
    assert node.value_int == -9223372036854775807 - 1
    assert node.value_double == -1e30


@pytest.mark.parametrize(
    "kind, check",
    [
        (JsonType.INVALID, "is_invalid"),
        (JsonType.FALSE, "is_false"),
        (JsonType.TRUE, "is_true"),
        (JsonType.NULL, "is_null"),
        (JsonType.NUMBER, "is_number"),
        (JsonType.STRING, "is_string"),
        (JsonType.ARRAY, "is_array"),
        (JsonType.OBJECT, "is_object"),
        (JsonType.RAW, "is_raw"),
    ],
)
def test_type_checks_are_exclusive(kind, check):
    node = Node(type=kind)
    checks = [
        "is_invalid", "is_false", "is_true", "is_null", "is_number",
        "is_string", "is_array", "is_object", "is_raw",
    ]
    results = {name: getattr(node, name)() for name in checks}
    assert results[check] is True
    assert sum(results.values()) == 1


def test_is_bool():
    assert Node(type=JsonType.TRUE).is_bool() is True
    assert Node(type=JsonType.FALSE).is_bool() is True
    assert Node(type=JsonType.NULL).is_bool() is False
    assert Node(type=JsonType.NUMBER).is_bool() is False