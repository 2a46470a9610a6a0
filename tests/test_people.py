import functools

import pytest

from sortlab.insertion import insertion_sort
from sortlab.merge import merge_sort
from sortlab.people import Person, demo, format_people, main, sample_people


def test_person_orders_by_name_only():
    assert Person("Ana", 900) < Person("Bia", 100)
    assert not Person("Bia", 100) < Person("Ana", 900)
    assert not Person("Ana", 1) < Person("Ana", 2)


def test_person_compared_with_other_type_raises():
    with pytest.raises(TypeError):
        Person("Ana", 1) < 3


def test_format_people_lines():
    people = sample_people()[3:4]
    assert format_people(people) == "Arthur Bernardes 900\n"


def test_sample_people_has_five_entries():
    people = sample_people()
    assert len(people) == 5
    assert people[0] == Person("Teste da Silva", 200)


@pytest.mark.parametrize(
    "algorithm", [insertion_sort, functools.partial(merge_sort, stable=False)]
)
def test_demo_output(algorithm):
    lines = demo(algorithm).splitlines()
    assert lines[0] == "ordenando inteiros"
    assert lines[1:6] == [str(n) for n in sorted([5, 9, 10, 2, 4])]
    assert lines[6] == "ordenando pessoas"
    expected = sorted(sample_people(), key=lambda p: p.name)
    assert lines[7:] == [f"{p.name} {p.cpf}" for p in expected]


@pytest.mark.parametrize("choice", ["insertion", "merge"])
def test_main_prints_demo(choice, capsys):
    assert main([choice]) == 0
    out = capsys.readouterr().out
    assert out == demo(insertion_sort)


def test_main_rejects_unknown_algorithm():
    with pytest.raises(SystemExit):
        main(["bubble"])