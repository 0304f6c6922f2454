import io

import pytest

from patterndemos.abstract_factory import (
    Body,
    Car,
    CarFactory,
    LuxuryCarFactory,
    SimpleCarFactory,
    Tire,
    factory_for,
    main,
)


def test_simple_factory_builds_simple_parts():
    car = SimpleCarFactory().build_whole_car()
    assert car.name == "SimlpleCar"
    assert car.tire.name == "SimpleTire"
    assert car.body.name == "SimpleBody"


def test_luxury_factory_builds_luxury_parts():
    car = LuxuryCarFactory().build_whole_car()
    assert car.name == "LuxuryCar"
    assert car.tire.name == "LuxuryTire"
    assert car.body.name == "LuxuryBody"


def test_luxury_parts_outrank_simple_parts():
    simple = SimpleCarFactory().build_whole_car()
    luxury = LuxuryCarFactory().build_whole_car()
    assert luxury.tire.pressure > simple.tire.pressure
    assert luxury.body.strength > simple.body.strength
    assert simple.tire.pressure == simple.body.strength
    assert luxury.tire.pressure == luxury.body.strength


def test_factory_for_selects_by_kind():
    assert factory_for("Simple").build_whole_car().name == "SimlpleCar"
    assert factory_for("Luxury").build_whole_car().name == "LuxuryCar"
    assert factory_for("whatever").build_whole_car().name == "LuxuryCar"


def test_details_lists_parts():
    car = Car("Test", tire=Tire("T", 1), body=Body("B", 2))
    lines = car.details().splitlines()
    assert lines[1] == "Car Test"
    assert lines[2] == "Tire TPressure 1"
    assert lines[3] == "Body BStrength 2"


def test_details_without_parts_raises():
    with pytest.raises(ValueError):
        Car("Bare").details()


def test_abstract_factory_cannot_be_instantiated():
    with pytest.raises(TypeError):
        CarFactory()


def test_print_details_writes_details(capsys):
    car = LuxuryCarFactory().build_whole_car()
    car.print_details()
    assert capsys.readouterr().out == car.details()


def test_main_with_argument(capsys):
    assert main(["Simple"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Type Luxury or Simple")
    assert "SimpleBody" in out
    assert "LuxuryBody" not in out


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Luxury\n"))
    assert main([]) == 0
    assert "LuxuryTire" in capsys.readouterr().out