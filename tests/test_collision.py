from flappy_core.collision import CollisionAndScoreEvaluator
from flappy_core.data_models import PlayerBody, ScoreState

from conftest import make_pair


def evaluator():
    return CollisionAndScoreEvaluator(field_height=600, margin=50)


def player_at(y):
    return PlayerBody(x=80, y=y)


def test_bottom_edge_past_lower_bound_ends_round():
    player = player_at(651 - 12)
    assert player.bounds.bottom == 651
    result = evaluator().evaluate(player, [], ScoreState())
    assert result.terminal == "out_of_bounds"


def test_just_inside_lower_bound_is_fine():
    player = player_at(649 - 12)
    assert not evaluator().out_of_bounds(player)


def test_top_edge_past_upper_bound_ends_round():
    player = player_at(-50 + 12)
    assert evaluator().out_of_bounds(player)


def test_scores_once_per_pair():
    scores = ScoreState()
    pairs = [make_pair(1, x=90, gap_y=300)]
    player = player_at(300)
    ev = evaluator()
    assert ev.evaluate(player, pairs, scores).scored == 1
    assert ev.evaluate(player, pairs, scores).scored == 0
    assert scores.score == 1
    assert scores.credited == {1}


def test_not_scored_before_leading_edge_passes_center():
    scores = ScoreState()
    pairs = [make_pair(1, x=97.5, gap_y=300)]
    evaluator().evaluate(player_at(300), pairs, scores)
    assert scores.score == 0


def test_flying_through_the_gap_is_not_a_collision():
    pairs = [make_pair(1, x=100, gap_y=300)]
    assert not evaluator().collides(player_at(300), pairs)


def test_hitting_either_obstacle_collides():
    ev = evaluator()
    assert ev.collides(player_at(300), [make_pair(1, x=100, gap_y=150)])
    assert ev.collides(player_at(300), [make_pair(2, x=100, gap_y=450)])


def test_scoring_runs_before_collision():
    scores = ScoreState()
    result = evaluator().evaluate(player_at(300), [make_pair(1, x=90, gap_y=150)], scores)
    assert result.scored == 1
    assert result.terminal == "collision"


def test_reap_drops_offscreen_pairs_and_keeps_count():
    scores = ScoreState()
    pairs = [make_pair(1, x=-53, gap_y=300), make_pair(2, x=-52, gap_y=300)]
    scores.credit(1)
    scores.credit(2)
    live = CollisionAndScoreEvaluator.reap(pairs, scores)
    assert [p.id for p in live] == [2]
    assert scores.credited == {2}
    assert scores.credited_count == scores.score == 2
