from dkits.listx import Listx, empty, not_empty


def test_module_empty():
    assert empty(Listx()) is True


def test_module_not_empty():
    lst = Listx()
    lst.push_back("hello world")
    assert not_empty(lst) is True
    assert empty(lst) is False


def test_listx_empty():
    assert Listx().empty() is True


def test_listx_not_empty():
    lst = Listx()
    lst.push_back("hello world")
    assert lst.not_empty() is True


def test_push_front_and_back_order():
    lst = Listx()
    lst.push_back("b")
    lst.push_front("a")
    lst.push_back("c")
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_for_each_visits_in_order():
    lst = Listx()
    lst.push_back("hello")
    lst.push_back("world")
    seen = []
    lst.for_each(seen.append)
    assert seen == ["hello", "world"]


def test_for_each_on_empty():
    seen = []
    Listx().for_each(seen.append)
    assert seen == []


def test_for_each_with_none_function():
    lst = Listx(["hello"])
    lst.for_each(None)
    assert list(lst) == ["hello"]