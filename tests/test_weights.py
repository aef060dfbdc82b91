from votemarket.data import EpochData, GaugeInfo
from votemarket.pubkey import Pubkey
from votemarket.weights import U32_MAX, calculate_weights


def make_data(payments, delegated_votes):
    gauges = [GaugeInfo(Pubkey(bytes([i + 1]) * 32), p, 0) for i, p in enumerate(payments)]
    return EpochData(
        config=Pubkey(bytes([99]) * 32),
        epoch=1,
        total_votes=delegated_votes,
        direct_votes=0,
        delegated_votes=delegated_votes,
        total_vote_buy_value=0.0,
        gauges=gauges,
    )


def test_single_gauge_takes_everything():
    result = calculate_weights(make_data([1.0], 500))
    assert result[0].weight == U32_MAX - 100
    assert result[0].votes == 500


def test_votes_are_proportional():
    result = calculate_weights(make_data([1.0, 3.0], 1000))
    assert [info.votes for info in result] == [250, 750]


def test_order_and_gauges_preserved():
    data = make_data([5.0, 2.0, 7.0], 10)
    result = calculate_weights(data)
    assert [info.gauge for info in result] == [gauge.gauge for gauge in data.gauges]


def test_weights_stay_within_limit():
    result = calculate_weights(make_data([1.5, 2.25, 10.0, 0.1], 12345))
    assert sum(info.weight for info in result) <= U32_MAX - 100
    assert sum(info.votes for info in result) <= 12345


def test_equal_payments_get_equal_weights():
    result = calculate_weights(make_data([4.0, 4.0], 100))
    assert result[0].weight == result[1].weight
    assert result[0].votes == result[1].votes


def test_zero_payment_gets_zero_weight():
    result = calculate_weights(make_data([0.0, 2.0], 100))
    assert result[0].weight == 0
    assert result[0].votes == 0
    assert result[1].votes == 100


def test_all_zero_payments_give_zeros():
    result = calculate_weights(make_data([0.0, 0.0], 100))
    assert [(info.weight, info.votes) for info in result] == [(0, 0), (0, 0)]


def test_no_gauges():
    assert calculate_weights(make_data([], 100)) == []