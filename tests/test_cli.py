import pytest

from fractol.cli import main, parse_args
from fractol.parse import USAGE_MESSAGE, ParseError
from fractol.render import FractalKind


def test_parse_mandelbrot():
    fractal = parse_args(["mandelbrot"])
    assert fractal.kind is FractalKind.MANDELBROT
    assert fractal.title == "mandelbrot"


def test_parse_julia():
    fractal = parse_args(["julia", "-0.5", "0.25"])
    assert fractal.kind is FractalKind.JULIA
    assert fractal.julia == complex(-0.5, 0.25)


def test_julia_prefix_is_enough():
    assert parse_args(["juliaset", "1", "2"]).kind is FractalKind.JULIA


def test_julia_with_wrong_count_fails():
    with pytest.raises(ParseError):
        parse_args(["julia", "1"])


def test_unknown_name_fails():
    with pytest.raises(ParseError):
        parse_args(["sierpinski"])


def test_no_arguments_fails():
    with pytest.raises(ParseError):
        parse_args([])


def test_invalid_julia_values_fail():
    with pytest.raises(ParseError, match="Invalid Julia parameters"):
        parse_args(["julia", "abc", "1"])


def test_main_prints_usage_on_error(capsys):
    assert main(["bogus"]) == 1
    assert capsys.readouterr().err == USAGE_MESSAGE


def test_main_reports_bad_julia(capsys):
    assert main(["julia", "1.2.3", "0"]) == 1
    err = capsys.readouterr().err
    assert err.startswith("Error: Invalid Julia parameters.\n")
    assert err.endswith(USAGE_MESSAGE)