from homevalue.data.base import ComparableProperty
from homevalue.services.market import confidence_label, market_trend, summarize_market


def comp(price, sqft, status="Sold", days=None):
    return ComparableProperty(
        address="1 Rue Test", price=price, status=status, bedrooms=3, bathrooms=2,
        square_feet=sqft, days_on_market=days, sold_date="Aug 2026" if status == "Sold" else None,
    )


COMPS = [comp(368000, 1200), comp(420000, 1500), comp(388000, 1600), comp(432000, 2000)]


def test_averages():
    m = summarize_market(COMPS, 402000)
    assert m.avg_price == 402000
    # mean of per-property ratios: (306.67 + 280 + 242.5 + 216) / 4
    assert m.avg_price_per_sqft == 261
    assert m.avg_price_per_sqft != round(402000 / 1575)
    assert m.comparables_count == 4
    assert m.has_data


def test_trend_all_sold_is_hot():
    assert market_trend(COMPS) == "Hot"


def test_trend_one_slow_listing_is_stable():
    comps = COMPS[:3] + [comp(432000, 2000, "Listed", 30)]
    assert market_trend(comps) == "Stable"


def test_trend_one_fast_listing_is_hot():
    comps = COMPS[:3] + [comp(432000, 2000, "Listed", 12)]
    assert market_trend(comps) == "Hot"


def test_trend_three_listings_is_cool():
    comps = [comp(400000, 1500, "Listed", 6)] * 3 + COMPS[:1]
    assert market_trend(comps) == "Cool"


def test_trend_slow_listings_is_cool():
    comps = [comp(400000, 1500, "Listed", 45), comp(400000, 1500, "Listed", 55)] + COMPS[:2]
    assert market_trend(comps) == "Cool"


def test_trend_two_quick_listings_is_stable():
    comps = [comp(400000, 1500, "Listed", 10), comp(400000, 1500, "Listed", 10)] + COMPS[:2]
    assert market_trend(comps) == "Stable"


def test_confidence_buckets():
    assert confidence_label(402000, 402000) == "High"
    assert confidence_label(430140, 402000) == "Medium"   # 7% away
    assert confidence_label(500000, 402000) == "Low"
    assert confidence_label(0, 0) == "Low"


def test_empty_list_has_no_data():
    m = summarize_market([], 450000)
    assert not m.has_data
    assert m.avg_price is None
    assert m.avg_price_per_sqft is None
    assert m.market_trend is None
    assert m.confidence is None
