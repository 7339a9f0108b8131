"""
Unit tests for EffectRouter.
"""

import logging

from engine.battle.effects import (
    AnimateEnemyAttack,
    EffectRouter,
    Presenter,
    PlaySound,
    PulseHealthBar,
    RenderEnemy,
    RenderHUD,
    RenderOutcome,
    RenderSnippet,
    ShowComboStreak,
    SpawnParticles,
    SubmitScore,
)


class ExplodingPresenter(Presenter):
    def render_snippet(self, text, cursor, mistake_at_cursor, hint, progress):
        raise RuntimeError("display lost")


class TestRouting:

    def test_each_effect_reaches_its_collaborator(self, recorder):
        router = EffectRouter(recorder, recorder)
        router.route([
            RenderEnemy("Orc", "O"),
            RenderSnippet("abcd", 2, False, "hint"),
            RenderHUD(80.0, 50.0, 3, 12, ""),
            ShowComboStreak("Combo! x10"),
            PlaySound("attack"),
            PlaySound("hurt"),
            PulseHealthBar("enemy"),
            SpawnParticles("slash"),
            AnimateEnemyAttack(),
            RenderOutcome("Game Over", 12),
        ])
        assert recorder.calls == [
            ("render_enemy", ("Orc", "O")),
            ("render_snippet", ("abcd", 2, False, "hint", 0.5)),
            ("render_hud", (80.0, 50.0, 3, 12, "")),
            ("show_combo_streak", ("Combo! x10",)),
            ("play_attack_sound", ()),
            ("play_hurt_sound", ()),
            ("pulse_health_bar", ("enemy",)),
            ("spawn_particles", ("slash", "snippet")),
            ("animate_enemy_attack", ()),
            ("render_outcome", ("Game Over", 12)),
        ]

    def test_default_collaborators_are_no_ops(self):
        EffectRouter().route([RenderEnemy("Orc", "O"), PlaySound("attack"), SubmitScore(5)])

    def test_failing_collaborator_does_not_stop_others(self, recorder, caplog):
        router = EffectRouter(ExplodingPresenter(), recorder)
        with caplog.at_level(logging.ERROR, logger="code_knight"):
            router.route([RenderSnippet("abc", 0, False), PlaySound("attack")])
        assert recorder.names() == ["play_attack_sound"]
        assert "effect_RenderSnippet" in caplog.text

    def test_unknown_effect_is_skipped(self, recorder, caplog):
        router = EffectRouter(recorder, recorder)
        with caplog.at_level(logging.WARNING, logger="code_knight"):
            router.route(["not an effect", PlaySound("hurt")])
        assert recorder.names() == ["play_hurt_sound"]
        assert "No route for effect" in caplog.text


class TestRenderSnippet:

    def test_progress(self):
        assert RenderSnippet("abcd", 0, False).progress == 0.0
        assert RenderSnippet("abcd", 4, False).progress == 1.0


class TestSubmitScore:

    def test_first_score_is_stored(self, high_scores):
        EffectRouter(high_scores=high_scores).route([SubmitScore(7)])
        assert high_scores.get_high_score() == 7

    def test_zero_score_with_no_record_is_not_stored(self, high_scores):
        EffectRouter(high_scores=high_scores).route([SubmitScore(0)])
        assert high_scores.get_high_score() is None

    def test_only_higher_scores_replace_the_record(self, high_scores):
        router = EffectRouter(high_scores=high_scores)
        router.route([SubmitScore(20)])
        router.route([SubmitScore(5)])
        assert high_scores.get_high_score() == 20
        router.route([SubmitScore(21)])
        assert high_scores.get_high_score() == 21

    def test_without_store_is_ignored(self):
        EffectRouter().route([SubmitScore(100)])
