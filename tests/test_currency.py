import pytest

from deskdemos.currency import (
    ALIGN_RIGHT_VCENTER,
    CurrencyModel,
    Role,
    sample_rates,
)


@pytest.fixture
def model():
    return CurrencyModel(sample_rates())


def _position(model, code):
    headers = [model.header_data(i) for i in range(model.row_count())]
    return headers.index(code)


def test_counts_match_number_of_currencies(model):
    assert model.row_count() == len(sample_rates())
    assert model.column_count() == len(sample_rates())


def test_headers_are_sorted_codes(model):
    headers = [model.header_data(i, Role.DISPLAY) for i in range(model.column_count())]
    assert headers == sorted(sample_rates())


def test_header_for_other_role_is_none(model):
    assert model.header_data(0, Role.EDIT) is None


def test_header_out_of_range_raises(model):
    with pytest.raises(IndexError):
        model.header_data(model.column_count())


def test_diagonal_is_one(model):
    for i in range(model.row_count()):
        assert model.data(i, i) == "1.0000"


def test_dollar_row_shows_input_rates(model):
    usd = _position(model, "USD")
    for code, rate in sample_rates().items():
        assert float(model.data(usd, _position(model, code))) == pytest.approx(rate, abs=1e-4)


def test_cross_rates_are_reciprocal(model):
    size = model.row_count()
    for row in range(size):
        for column in range(size):
            forward = float(model.data(row, column, Role.EDIT))
            backward = float(model.data(column, row, Role.EDIT))
            assert forward * backward == pytest.approx(1.0, rel=1e-2)


def test_zero_rate_row_is_marked():
    model = CurrencyModel({"AAA": 0.0, "BBB": 2.0})
    assert model.data(0, 1) == "####"


def test_alignment_role(model):
    assert model.data(0, 1, Role.TEXT_ALIGNMENT) == ALIGN_RIGHT_VCENTER


def test_invalid_index_gives_none(model):
    assert model.data(-1, 0) is None
    assert model.data(0, model.column_count()) is None


def test_editable_only_off_diagonal(model):
    assert model.is_editable(0, 0) is False
    assert model.is_editable(0, 1) is True


def test_set_data_round_trip(model):
    usd = _position(model, "USD")
    eur = _position(model, "EUR")
    assert model.set_data(usd, eur, 2.5) is True
    assert float(model.data(usd, eur)) == pytest.approx(2.5)
    assert model.rates["EUR"] == pytest.approx(2.5)


def test_set_data_accepts_text(model):
    usd = _position(model, "USD")
    gbp = _position(model, "GBP")
    assert model.set_data(usd, gbp, "0.75") is True
    assert model.rates["GBP"] == pytest.approx(0.75)


def test_set_data_refused_on_diagonal_and_wrong_role(model):
    before = model.rates
    assert model.set_data(1, 1, 3.0) is False
    assert model.set_data(0, 1, 3.0, Role.DISPLAY) is False
    assert model.set_data(0, 99, 3.0) is False
    assert model.rates == before


def test_set_data_rejects_non_numbers(model):
    with pytest.raises(ValueError):
        model.set_data(0, 1, "abc")


def test_model_copies_mapping():
    rates = sample_rates()
    model = CurrencyModel(rates)
    rates["USD"] = 99.0
    assert model.rates == sample_rates()