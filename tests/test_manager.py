from scoreboard.config import DEFAULT_GAME_TYPES
from scoreboard.models.data import GameType, Severity
from scoreboard.store import ScoreboardManager

from .conftest import WINDOW_MS


def test_arcade_scenario(manager):
    arcade = manager.add_game_type('Arcade')

    first = manager.submit_score('Ann', '150', arcade.id)
    assert first.accepted
    assert [s.player_name for s in manager.top_scores(arcade.id)] == ['Ann']

    second = manager.submit_score('Bo', '300', arcade.id)
    assert second.accepted
    assert [s.player_name for s in manager.top_scores(arcade.id)] == ['Bo', 'Ann']

    third = manager.submit_score('X', 'abc', arcade.id)
    assert not third.accepted
    assert not third.rate_limited
    assert manager.count_scores(arcade.id) == 2


def test_non_numeric_score_with_valid_name_is_rejected(manager):
    outcome = manager.submit_score('Xavier', 'abc', '1')
    assert outcome.result.message == 'Score must be a valid number'
    assert manager.count_scores('1') == 0
    assert manager.rate_limit().submission_count == 0


def test_accepted_score_fields(manager, clock):
    outcome = manager.submit_score('  Ann  ', '42abc', '1')
    score = outcome.score
    assert score.player_name == 'Ann'
    assert score.score == 42
    assert score.game_type == '1'
    assert score.timestamp.timestamp() * 1000 == clock.now
    assert outcome.result.message == 'Score submitted successfully!'
    assert outcome.result.severity == Severity.SUCCESS


def test_score_ids_increase(manager):
    ids = [int(manager.submit_score('Ann', str(i), '1').score.id) for i in range(3)]
    assert ids == sorted(ids)
    assert len(set(ids)) == 3


def test_short_name_adds_nothing(manager):
    outcome = manager.submit_score('A', '10', '1')
    assert not outcome.accepted
    assert manager.count_scores('1') == 0


def test_single_submission_window(clock, game_types):
    manager = ScoreboardManager(game_types=game_types, window_ms=WINDOW_MS, max_submissions=1, clock=clock)
    assert manager.submit_score('Ann', '10', '1').accepted

    clock.advance(10)
    outcome = manager.submit_score('Bo', '20', '1')
    assert outcome.rate_limited
    assert not outcome.accepted
    assert outcome.rate_limit.time_until_reset == WINDOW_MS - 10
    assert outcome.result.message == 'Rate limit exceeded. Try again in 60 seconds'
    assert manager.count_scores('1') == 1


def test_rate_limit_measured_from_last_submission(manager, clock):
    for _ in range(3):
        assert manager.submit_score('Ann', '10', '1').accepted
        clock.advance(20000)

    # 60s after the first submission, 20s after the third.
    assert manager.submit_score('Ann', '10', '1').rate_limited
    clock.advance(WINDOW_MS - 20000)
    assert manager.submit_score('Ann', '10', '1').rate_limited
    clock.advance(1)
    assert manager.submit_score('Ann', '10', '1').accepted


def test_rate_limited_submission_skips_validation(clock, game_types):
    manager = ScoreboardManager(game_types=game_types, max_submissions=1, clock=clock)
    manager.submit_score('Ann', '10', '1')
    outcome = manager.submit_score('', '', None)
    assert outcome.rate_limited


def test_submission_uses_selected_game_type(manager):
    assert manager.select_game_type('2')
    outcome = manager.submit_score('Ann', '10')
    assert outcome.score.game_type == '2'


def test_select_unknown_game_type_keeps_selection(manager):
    manager.select_game_type('1')
    assert not manager.select_game_type('missing')
    assert manager.selected_game_type == '1'
    assert manager.select_game_type(None)
    assert manager.selected_game_type is None


def test_remove_selected_game_type_clears_selection(manager):
    manager.select_game_type('1')
    manager.submit_score('Ann', '10')
    removal = manager.remove_game_type('1')
    assert removal.selection_cleared
    assert removal.scores_removed == 1
    assert manager.selected_game_type is None
    assert manager.top_scores('1') == []
    assert manager.rate_limit().submission_count == 1

    again = manager.remove_game_type('1')
    assert not again.removed
    assert not again.selection_cleared


def test_remove_other_game_type_keeps_selection(manager):
    manager.select_game_type('2')
    removal = manager.remove_game_type('1')
    assert not removal.selection_cleared
    assert manager.selected_game_type == '2'


def test_feedback_expires_after_display_window(manager, clock):
    manager.submit_score('Ann', '10', '1')
    assert manager.last_result().is_valid
    clock.advance(2999)
    assert manager.last_result() is not None
    clock.advance(1)
    assert manager.last_result() is None


def test_new_feedback_supersedes_old(manager, clock):
    manager.submit_score('Ann', '10', '1')
    clock.advance(2000)
    manager.submit_score('A', '10', '1')
    clock.advance(2000)
    result = manager.last_result()
    assert not result.is_valid
    assert 'at least 2' in result.message


def test_tick_expires_feedback_and_refreshes_countdown(manager, clock):
    manager.submit_score('Ann', '10', '1')
    clock.advance(5000)
    state = manager.tick()
    assert state.time_until_reset == WINDOW_MS - 5000
    assert manager.last_result() is None


def test_preview_records_nothing(manager):
    result = manager.preview('Ann', '10', '1')
    assert result.is_valid
    assert result.message == 'Score is valid and ready to submit'
    assert manager.count_scores('1') == 0
    assert manager.last_result() is None


def test_top_scores_default_limit(clock):
    manager = ScoreboardManager(game_types=[GameType('1', 'A', '')], max_submissions=100, clock=clock)
    for i in range(12):
        manager.submit_score('Ann', str(i), '1')
    assert len(manager.top_scores('1')) == 10
    assert len(manager.top_scores('1', 12)) == 12


def test_from_settings_uses_default_game_types():
    manager = ScoreboardManager.from_settings()
    assert [g.id for g in manager.game_types()] == [seed.id for seed in DEFAULT_GAME_TYPES]
    assert manager.rate_limiter.window_ms == 60000
    assert manager.rate_limiter.max_submissions == 3


def test_get_instance_is_shared_until_reset():
    ScoreboardManager.reset_instance()
    first = ScoreboardManager.get_instance()
    assert ScoreboardManager.get_instance() is first
    ScoreboardManager.reset_instance()
    assert ScoreboardManager.get_instance() is not first
    ScoreboardManager.reset_instance()
