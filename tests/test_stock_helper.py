"""Tests for the stock availability resolver (no database needed)."""
import pytest

from apps.stock_filter.services import StockHelper, VariationSnapshot


def variation(id, stock, has_stock_field=True, **attributes):
    return VariationSnapshot(
        id=id,
        stock_value=stock,
        has_stock_field=has_stock_field,
        attribute_values=attributes,
    )


@pytest.mark.parametrize("stock, expected", [
    (None, False),
    ('', False),
    (0, False),
    (-3, False),
    ('abc', False),
    (1, True),
    (7, True),
    ('5', True),
    (float('inf'), False),
    (float('nan'), False),
])
def test_is_in_stock(stock, expected):
    assert StockHelper.is_in_stock(variation(1, stock)) is expected


def test_missing_stock_field_is_out_of_stock():
    # Same outcome as a zero stock, even with a positive leftover value
    assert StockHelper.is_in_stock(variation(1, 10, has_stock_field=False)) is False
    assert StockHelper.is_in_stock(variation(1, None, has_stock_field=False)) is False


def test_build_stock_map():
    variations = [variation(1, 0), variation(2, 3), variation(3, None)]
    assert StockHelper.build_stock_map(variations) == {1: False, 2: True, 3: False}


def test_first_in_stock_follows_order():
    variations = [variation(1, 0), variation(2, 4), variation(3, 9)]
    assert StockHelper.get_first_in_stock_variation(variations).id == 2
    assert StockHelper.get_first_in_stock_variation(list(reversed(variations))).id == 3


def test_first_in_stock_none_when_nothing_in_stock():
    variations = [variation(1, 0), variation(2, -1), variation(3, None)]
    assert StockHelper.get_first_in_stock_variation(variations) is None
    assert StockHelper.get_first_in_stock_variation([]) is None


def test_has_any_in_stock():
    assert StockHelper.has_any_in_stock([variation(1, 0), variation(2, 1)])
    assert not StockHelper.has_any_in_stock([variation(1, 0), variation(2, None)])
    assert not StockHelper.has_any_in_stock([])


def test_in_stock_ids_and_filter():
    variations = [variation(1, 2), variation(2, 0), variation(3, 8)]
    assert StockHelper.get_in_stock_variation_ids(variations) == [1, 3]
    assert [v.id for v in StockHelper.filter_in_stock_variations(variations)] == [1, 3]


def test_build_attribute_variation_map():
    variations = [
        variation(1, 0, color='red', size='s'),
        variation(2, 5, color='red', size='l'),
        variation(3, 3, color='blue'),
    ]
    assert StockHelper.build_attribute_variation_map(variations) == {
        'color': {'red': [1, 2], 'blue': [3]},
        'size': {'s': [1], 'l': [2]},
    }


def test_attribute_map_skips_empty_references():
    variations = [variation(1, 1, color=None, size='m')]
    assert StockHelper.build_attribute_variation_map(variations) == {
        'size': {'m': [1]},
    }


def test_disabled_values_need_every_variation_out_of_stock():
    attribute_map = {'size': {'s': [1, 2], 'm': [3], 'l': [4, 5]}}
    stock_map = {1: False, 2: True, 3: False, 4: False, 5: False}

    assert StockHelper.get_disabled_attribute_values(attribute_map, stock_map, 'size') == ['m', 'l']


def test_disabled_values_unknown_dimension():
    assert StockHelper.get_disabled_attribute_values({}, {}, 'size') == []


def test_dangling_variation_id_contributes_nothing():
    attribute_map = {'color': {'red': [1, 99], 'blue': [99]}}
    stock_map = {1: True}

    assert StockHelper.get_disabled_attribute_values(attribute_map, stock_map, 'color') == ['blue']


def test_scenario_a_mixed_stock_disables_nothing():
    variations = [
        variation(1, 0, color='red', size='small'),
        variation(2, 5, color='red', size='large'),
        variation(3, 3, color='blue', size='small'),
    ]
    stock_map = StockHelper.build_stock_map(variations)
    attribute_map = StockHelper.build_attribute_variation_map(variations)

    assert StockHelper.get_disabled_attributes(attribute_map, stock_map) == {}
    for dimension in ('color', 'size'):
        assert StockHelper.get_disabled_attribute_values(attribute_map, stock_map, dimension) == []


def test_scenario_b_all_out_of_stock():
    variations = [
        variation(1, 0, color='red'),
        variation(2, -2, color='blue'),
        variation(3, None, color='green'),
    ]
    assert StockHelper.has_any_in_stock(variations) is False
    assert StockHelper.get_first_in_stock_variation(variations) is None

    stock_map = StockHelper.build_stock_map(variations)
    attribute_map = StockHelper.build_attribute_variation_map(variations)
    assert StockHelper.get_disabled_attributes(attribute_map, stock_map) == {
        'color': ['red', 'blue', 'green'],
    }


def test_scenario_c_single_variation_in_stock():
    only = variation(1, 7, color='red')
    stock_map = StockHelper.build_stock_map([only])
    attribute_map = StockHelper.build_attribute_variation_map([only])

    assert StockHelper.is_in_stock(only)
    assert StockHelper.get_disabled_attributes(attribute_map, stock_map) == {}
    assert StockHelper.get_first_in_stock_variation([only]) is only


def test_scenario_e_value_without_variations_is_disabled():
    variations = [variation(1, 4, color='red')]
    attribute_map = StockHelper.seed_attribute_values(
        StockHelper.build_attribute_variation_map(variations),
        {'color': ['red', 'blue']},
    )
    stock_map = StockHelper.build_stock_map(variations)

    assert attribute_map == {'color': {'red': [1], 'blue': []}}
    assert StockHelper.get_disabled_attribute_values(attribute_map, stock_map, 'color') == ['blue']


def test_seed_does_not_mutate_input():
    attribute_map = {'color': {'red': [1]}}
    StockHelper.seed_attribute_values(attribute_map, {'color': ['blue'], 'size': ['m']})
    assert attribute_map == {'color': {'red': [1]}}


def test_recomputation_is_idempotent():
    variations = [
        variation(1, 0, color='red', size='s'),
        variation(2, 2, color='blue', size='s'),
        variation(3, 0, color='blue', size='m'),
    ]
    first = StockHelper.build_attribute_variation_map(variations)
    second = StockHelper.build_attribute_variation_map(variations)
    assert first == second

    stock_map = StockHelper.build_stock_map(variations)
    assert (
        StockHelper.get_disabled_attributes(first, stock_map)
        == StockHelper.get_disabled_attributes(second, stock_map)
        == {'color': ['red'], 'size': ['m']}
    )


def test_refresh_payload():
    variations = [
        variation(1, 0, color='red'),
        variation(2, 3, color='blue'),
    ]
    payload = StockHelper.build_refresh_payload(
        variations, selected=variations[0], known_values={'color': ['green']}
    )

    assert payload == {
        'stockMap': {1: False, 2: True},
        'disabledAttributes': {'color': ['red', 'green']},
        'selectedVariationId': 1,
        'selectedVariationInStock': False,
    }


def test_refresh_payload_without_selection():
    payload = StockHelper.build_refresh_payload([variation(1, 3, color='red')])
    assert payload['selectedVariationId'] is None
    assert payload['selectedVariationInStock'] is False
    assert payload['disabledAttributes'] == {}
