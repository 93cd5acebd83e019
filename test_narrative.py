#!/usr/bin/env python3
"""
Test suite for the narrative generator and template engine.

Tests:
1. Token rendering and alternations
2. Every corpus template renders cleanly
3. Weighted selection avoids last turn's template
4. Headline and scene classification
5. Choice sets by role and game-over state
6. Full narrative generation from a context
"""

import random
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from sideline.corpus import (
    BUZZ_LINES,
    CHOICE_SETS,
    FALLBACK_SCENES,
    HEADLINES,
    ROLE_CHOICE_CONTEXTS,
    SCENES,
    STAFF_NOTES,
    TICKER_LINES,
    choice_sets_for,
    find_choice,
)
from sideline.errors import TemplateTokenError
from sideline.models import (
    CAROUSEL,
    CHOICE_TYPES,
    OFFSEASON,
    POSTSEASON,
    PRESEASON,
    REGULAR_SEASON,
    GameResult,
    SaveHeader,
)
from sideline.narrative import (
    NarrativeContext,
    build_choices,
    build_season_summary,
    classify_headline,
    classify_scene,
    describe_job_security,
    describe_matchup,
    describe_record,
    describe_season_context,
    generate_narrative,
    is_on_hot_seat,
)
from sideline.templates import (
    TOKEN_NAMES,
    TokenContext,
    get_template_tokens,
    has_unreplaced_tokens,
    render,
    replace_tokens,
    resolve_alternations,
    select_weighted,
)


def divider(title: str):
    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}")


def make_header(phase: str = REGULAR_SEASON, record: str = "5-3", role: str = "Head Coach",
                team: str = "Nebraska", team_id: str = "nebraska", **kw) -> SaveHeader:
    header = SaveHeader(
        date="October 1996",
        age=44,
        team=team,
        conference="Big 12",
        role=role,
        season_record=record,
        timeline_phase=phase,
        coach_name="Pat Doyle",
        team_id=team_id,
        seed=3,
        years_at_job=3,
    )
    header.stats.prestige = "Power Program"
    for key, value in kw.items():
        setattr(header, key, value)
    return header


def game(won: bool, margin: int = 10, opponent_prestige: int = 3, rank_before: int = 0) -> GameResult:
    ours, theirs = (30, 30 - margin) if won else (30 - margin, 30)
    return GameResult(week=4, opponent="Iowa State", our_score=ours, their_score=theirs,
                      opponent_prestige=opponent_prestige, rank_before=rank_before)


# ──────────────────────────────────────────────
# TEST 1: Token Rendering
# ──────────────────────────────────────────────

def test_replace_tokens():
    divider("TEST 1: Token Rendering")

    ctx = TokenContext(TEAM="Cornhuskers", RECORD="9-3")
    text = replace_tokens("{TEAM} finish {RECORD}", ctx)
    print(f"  {text}")
    assert text == "Cornhuskers finish 9-3"
    assert get_template_tokens("{TEAM} vs {OPPONENT}, {TEAM} again") == ["TEAM", "OPPONENT"]

    with pytest.raises(TemplateTokenError):
        replace_tokens("{TEAM} meets {MASCOT}", ctx)
    print("  Unknown token raised TemplateTokenError")
    print("  PASSED")


def test_alternations_are_seeded():
    divider("TEST 1b: Alternations")

    template = "{TEAM} {cruise|roll|stumble} into {RECORD}"
    first = render(template, TokenContext(TEAM="Iowa"), random.Random(8))
    second = render(template, TokenContext(TEAM="Iowa"), random.Random(8))
    print(f"  {first}")
    assert first == second
    assert "|" not in first and "{" not in first
    assert resolve_alternations("no choices here", random.Random(1)) == "no choices here"
    print("  PASSED")


# ──────────────────────────────────────────────
# TEST 2: Corpus Integrity
# ──────────────────────────────────────────────

def test_every_template_renders():
    divider("TEST 2: Corpus Renders")

    ctx = TokenContext()
    rng = random.Random(0)
    texts = [h.text for h in HEADLINES]
    texts += [s.title for s in SCENES] + [s.description for s in SCENES]
    texts += [t for pair in FALLBACK_SCENES.values() for t in pair]
    texts += [line for pool in BUZZ_LINES.values() for line in pool]
    texts += [line for pool in STAFF_NOTES.values() for line in pool]
    texts += TICKER_LINES

    for text in texts:
        assert set(get_template_tokens(text)) <= set(TOKEN_NAMES), text
        out = render(text, ctx, rng)
        assert not has_unreplaced_tokens(out), f"leaked token: {out}"
        assert "{" not in out, f"leaked brace: {out}"
    print(f"  {len(texts)} templates rendered")

    ids = [h.id for h in HEADLINES] + [s.id for s in SCENES] + [cs.id for cs in CHOICE_SETS]
    assert len(ids) == len(set(ids)), "template ids must be unique"
    print("  PASSED")


def test_choice_sets_cover_role_contexts():
    divider("TEST 2b: Choice Sets")

    for group, contexts in ROLE_CHOICE_CONTEXTS.items():
        for context in contexts:
            assert choice_sets_for(context), f"{group} context '{context}' has no choice sets"
    for cs in CHOICE_SETS:
        for choice in cs.choices:
            assert find_choice(choice.id) is not None
            assert choice.type in CHOICE_TYPES
    assert find_choice("not_a_choice") is None
    print("  PASSED")


# ──────────────────────────────────────────────
# TEST 3: Weighted Selection
# ──────────────────────────────────────────────

def test_select_weighted_skips_previous():
    divider("TEST 3: Weighted Selection")

    bucket = [h for h in HEADLINES if h.category == "general"]
    assert len(bucket) > 1
    for seed in range(50):
        pick = select_weighted(bucket, random.Random(seed), exclude_id=bucket[0].id)
        assert pick.id != bucket[0].id

    only = bucket[:1]
    assert select_weighted(only, random.Random(1), exclude_id=only[0].id) is only[0]
    assert select_weighted([], random.Random(1)) is None
    print("  PASSED")


# ──────────────────────────────────────────────
# TEST 4: Classification
# ──────────────────────────────────────────────

def test_classify_headline():
    divider("TEST 4: Headline Classification")

    header = make_header()
    cases = [
        (NarrativeContext(header=header, game=game(True, margin=24)), "win_blowout"),
        (NarrativeContext(header=header, game=game(True, margin=3, opponent_prestige=5)), "win_close"),
        (NarrativeContext(header=header, game=game(False, margin=3, rank_before=6)), "loss_upset"),
        (NarrativeContext(header=header, game=game(False, margin=28)), "loss_blowout"),
        (NarrativeContext(header=make_header(team="Unemployed", team_id="", role="Job Seeker",
                                             timeline_phase=CAROUSEL)), "job_hunt"),
        (NarrativeContext(header=make_header(team="Unemployed", team_id="", role="Job Seeker"),
                          fired=True, former_team_id="nebraska"), "fired"),
        (NarrativeContext(header=make_header(phase=OFFSEASON, record="0-0"), new_hire=True), "hired"),
        (NarrativeContext(header=make_header(job_security="Hot Seat")), "hot_seat"),
        (NarrativeContext(header=make_header(job_security="Secure - Extension Talks")), "job_security"),
        (NarrativeContext(header=make_header(phase=PRESEASON, record="0-0")), "preseason"),
        (NarrativeContext(header=make_header(phase=POSTSEASON, record="9-3")), "bowl_selection"),
    ]
    for ctx, expected in cases:
        got = classify_headline(ctx)
        print(f"  {expected:<15} -> {got}")
        assert got == expected
    print("  PASSED")


def test_classify_scene():
    divider("TEST 4b: Scene Classification")

    unemployed = make_header(phase=CAROUSEL, team="Unemployed", team_id="", role="Job Seeker")
    assert classify_scene(NarrativeContext(header=unemployed)) == "job_hunt"
    assert classify_scene(NarrativeContext(header=unemployed, fired=True)) == "fired"

    ranked = make_header(phase=POSTSEASON, record="12-0")
    ranked.stats.ap_rank = 1
    assert classify_scene(NarrativeContext(header=ranked)) == "championship"

    fresh = make_header(phase=PRESEASON, record="0-0", years_at_job=0)
    assert classify_scene(NarrativeContext(header=fresh)) == "new_job"

    rolling = make_header(record="6-0", streak=6)
    assert classify_scene(NarrativeContext(header=rolling)) == "winning"

    quiet = make_header(phase=OFFSEASON, record="0-0")
    assert classify_scene(NarrativeContext(header=quiet, previous_record="11-1")) == "winning"
    assert classify_scene(NarrativeContext(header=quiet)) == "recruiting"
    print("  PASSED")


def test_describers():
    divider("TEST 4c: Describers")

    assert describe_record(0, 0) == "early in the season"
    assert describe_record(8, 0) == "undefeated"
    assert describe_record(0, 5) == "winless"
    assert describe_record(9, 2) == "dominant"

    assert describe_season_context(1, 1) == "early season"
    assert describe_season_context(5, 1) == "in contention"
    assert describe_season_context(1, 5) == "facing a long season"
    assert describe_season_context(8, 2) == "season finale approaching"
    assert describe_season_context(3, 3) == "midseason"

    labels = [describe_job_security(s) for s in (95, 80, 65, 50, 35, 20, 5)]
    assert labels == ["rock solid", "secure", "stable", "in question",
                      "on thin ice", "hanging by a thread", "all but gone"]
    assert is_on_hot_seat(39) and not is_on_hot_seat(40)

    assert describe_matchup(5, 2) == "heavy favorites against"
    assert describe_matchup(3, 3) == "evenly matched with"
    assert describe_matchup(1, 4) == "facing a tough test against"

    line = build_season_summary("Nebraska", "7-1", ap_rank=6, streak=5)
    print(f"  {line}")
    assert line.startswith("#6 Nebraska stand at 7-1")
    assert "5 straight wins" in line
    print("  PASSED")


# ──────────────────────────────────────────────
# TEST 5: Choices
# ──────────────────────────────────────────────

def test_choices_end_with_continue():
    divider("TEST 5: Choices")

    for seed in range(20):
        choices = build_choices(NarrativeContext(header=make_header()), random.Random(seed))
        assert choices[-1].id == "advance"
        ids = [c.id for c in choices]
        assert len(ids) == len(set(ids))
    print("  PASSED")


def test_entry_coach_choices_are_restricted():
    divider("TEST 5b: Entry Role Choices")

    allowed = {c.id for ctx in ROLE_CHOICE_CONTEXTS["entry"]
               for cs in choice_sets_for(ctx) for c in cs.choices}
    header = make_header(role="Graduate Assistant")
    for seed in range(20):
        choices = build_choices(NarrativeContext(header=header), random.Random(seed))
        for c in choices[:-1]:
            assert c.id in allowed, f"{c.id} is not an entry-level choice"
    print("  PASSED")


def test_game_over_offers_only_recovery():
    divider("TEST 5c: Game Over Choices")

    ctx = NarrativeContext(header=make_header(phase=CAROUSEL), game_over=True)
    choices = build_choices(ctx, random.Random(1))
    assert [c.id for c in choices] == ["rock_bottom_recovery"]
    print("  PASSED")


# ──────────────────────────────────────────────
# TEST 6: Full Generation
# ──────────────────────────────────────────────

def test_generate_narrative():
    divider("TEST 6: Generate Narrative")

    ctx = NarrativeContext(
        header=make_header(),
        game=game(True, margin=14),
        featured_player=("Tommie Frazier", "QB"),
        action_id="advance",
        action_kind="advance",
        custom_context="{Keep} the {TEAM} focused",
    )
    result = generate_narrative(ctx, random.Random(4))
    print(f"  Headline: {result.headline}")
    print(f"  Scene:    {result.scene_title}")
    print(f"  Resolve:  {result.resolution}")

    assert result.headline and result.scene_title and result.scene_description
    assert "Iowa State" in result.scene_description
    assert result.resolution.endswith("Keep the TEAM focused.")
    assert len(result.buzz) == 2
    assert {"headline", "scene", "choices_0"} <= set(result.template_ids)
    for text in [result.headline, result.scene_description, result.resolution] + result.ticker:
        assert not has_unreplaced_tokens(text)

    again = generate_narrative(ctx, random.Random(4), previous=result.template_ids)
    bucket = [h for h in HEADLINES if h.category == classify_headline(ctx)]
    if len(bucket) > 1:
        assert again.template_ids["headline"] != result.template_ids["headline"]
    print("  PASSED")


def test_opening_turn_has_no_resolution():
    divider("TEST 6b: Opening Turn")

    header = make_header(phase=CAROUSEL, record="0-0", team="Free Agent", team_id="",
                         role="Job Seeker")
    result = generate_narrative(NarrativeContext(header=header), random.Random(2))
    assert result.resolution is None
    assert result.headline
    print("  PASSED")


def main():
    tests = [
        test_replace_tokens,
        test_alternations_are_seeded,
        test_every_template_renders,
        test_choice_sets_cover_role_contexts,
        test_select_weighted_skips_previous,
        test_classify_headline,
        test_classify_scene,
        test_describers,
        test_choices_end_with_continue,
        test_entry_coach_choices_are_restricted,
        test_game_over_offers_only_recovery,
        test_generate_narrative,
        test_opening_turn_has_no_resolution,
    ]

    passed = 0
    failed = 0
    for test_fn in tests:
        try:
            test_fn()
            passed += 1
        except Exception as e:
            failed += 1
            print(f"\n  FAILED: {test_fn.__name__}")
            print(f"    Error: {e}")
            import traceback
            traceback.print_exc()

    divider("RESULTS")
    print(f"  Passed: {passed}/{len(tests)}")
    print(f"  Failed: {failed}/{len(tests)}")

    if failed == 0:
        print("\n  ALL TESTS PASSED")
    else:
        print(f"\n  {failed} TEST(S) FAILED")
        sys.exit(1)


if __name__ == "__main__":
    main()
