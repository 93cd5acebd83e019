"""
Sideline Saga Template Corpus

Inert narrative data: headlines, scenes, choice sets, media buzz, staff
notes and ticker lines.  Rendering lives in sideline.templates; selection
lives in sideline.narrative.

Tokens (always available, see templates.TokenContext):
    {TEAM} {TEAM_FULL} {COACH} {COACH_LAST} {RECORD} {WINS} {LOSSES}
    {YEAR} {CONFERENCE} {STREAK} {RANKING} {OPPONENT} {SCORE} {PLAYER}
    {POSITION} {BOWL} {BOWL_CITY} {ROLE} {AGE} {PHASE}

Inline alternation ``{first|second|third}`` is resolved before tokens.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class HeadlineTemplate:
    id: str
    text: str
    category: str
    tone: str = "neutral"
    weight: int = 5


@dataclass(frozen=True)
class SceneTemplate:
    id: str
    phase: str
    context: str
    title: str
    description: str
    tone: str = "neutral"
    weight: int = 5


@dataclass(frozen=True)
class ChoiceTemplate:
    id: str
    text: str
    description: str
    risk_level: str = "moderate"
    effects: Dict[str, int] = field(default_factory=dict, hash=False)
    type: str = "action"


@dataclass(frozen=True)
class ChoiceSet:
    id: str
    context: str
    situation: str
    choices: List[ChoiceTemplate] = field(default_factory=list, hash=False)


def _h(id_, text, category, tone="neutral", weight=5):
    return HeadlineTemplate(id_, text, category, tone, weight)


# ──────────────────────────────────────────────
# HEADLINES
# ──────────────────────────────────────────────

HEADLINES: List[HeadlineTemplate] = [
    # wins
    _h("win_blow_1", "{TEAM} {hammer|flatten|bury} {OPPONENT} {SCORE}", "win_blowout", "positive", 10),
    _h("win_blow_2", "{COACH_LAST}'s {TEAM} never let {OPPONENT} breathe in {SCORE} romp", "win_blowout", "positive", 8),
    _h("win_blow_3", "Backups mop up as {TEAM} cruise past {OPPONENT}", "win_blowout", "positive", 6),
    _h("win_blow_4", "Statement made: {TEAM} pile it on in {SCORE} win", "win_blowout", "positive", 7),
    _h("win_close_1", "{TEAM} escape {OPPONENT} {SCORE}", "win_close", "positive", 10),
    _h("win_close_2", "{Late stop|Final drive|Fourth-down gamble} lifts {TEAM} past {OPPONENT}", "win_close", "positive", 8),
    _h("win_close_3", "Not pretty, but {TEAM} find a way against {OPPONENT}", "win_close", "positive", 7),
    _h("win_close_4", "{COACH_LAST} sweats out {SCORE} thriller", "win_close", "positive", 6),
    _h("win_upset_1", "STUNNER: {TEAM} topple {OPPONENT} {SCORE}", "win_upset", "positive", 10),
    _h("win_upset_2", "Nobody gave {TEAM} a chance. They beat {OPPONENT} anyway", "win_upset", "positive", 8),
    _h("win_upset_3", "{COACH_LAST} pulls off the upset of the {season|year|weekend}", "win_upset", "positive", 8),
    _h("win_streak_1", "{TEAM} make it {STREAK} straight", "win_streak", "positive", 10),
    _h("win_streak_2", "The streak hits {STREAK}: {TEAM} roll on at {RECORD}", "win_streak", "positive", 8),
    _h("win_streak_3", "{COACH_LAST}'s {TEAM} {keep rolling|stay hot|refuse to lose}", "win_streak", "positive", 7),
    # losses
    _h("loss_blow_1", "{OPPONENT} embarrass {TEAM} {SCORE}", "loss_blowout", "negative", 10),
    _h("loss_blow_2", "Rock bottom? {TEAM} routed by {OPPONENT}", "loss_blowout", "negative", 8),
    _h("loss_blow_3", "Boos rain down as {TEAM} collapse against {OPPONENT}", "loss_blowout", "negative", 7),
    _h("loss_close_1", "{TEAM} fall just short against {OPPONENT}", "loss_close", "negative", 10),
    _h("loss_close_2", "Heartbreak: {OPPONENT} edge {TEAM} {SCORE}", "loss_close", "negative", 8),
    _h("loss_close_3", "{Missed kick|Late turnover|Fourth-down stop} dooms {TEAM}", "loss_close", "negative", 7),
    _h("loss_upset_1", "UPSET: {RANKING} {TEAM} stunned by {OPPONENT}", "loss_upset", "negative", 10),
    _h("loss_upset_2", "{OPPONENT} shock the {TEAM}, and the polls will notice", "loss_upset", "negative", 8),
    _h("loss_streak_1", "{TEAM} drop {STREAK} straight", "loss_streak", "negative", 10),
    _h("loss_streak_2", "Skid reaches {STREAK} as {TEAM} sink to {RECORD}", "loss_streak", "negative", 8),
    _h("loss_streak_3", "Where is the bottom for {COACH_LAST}'s {TEAM}?", "loss_streak", "negative", 7),
    # job status
    _h("hot_seat_1", "Boosters growing restless with {COACH_LAST}", "hot_seat", "negative", 10),
    _h("hot_seat_2", "AD offers lukewarm support for {COACH}", "hot_seat", "negative", 8),
    _h("hot_seat_3", "{Radio callers|Message boards|Columnists} want {COACH_LAST} gone", "hot_seat", "negative", 8),
    _h("hot_seat_4", "{RECORD} and counting: the {TEAM} need answers", "hot_seat", "negative", 6),
    _h("secure_1", "{TEAM} {lock up|reward|extend} {COACH_LAST}", "job_security", "positive", 10),
    _h("secure_2", "Board chair: {COACH} is our {answer|future|foundation}", "job_security", "positive", 8),
    _h("secure_3", "{COACH_LAST} has {TEAM_FULL} pointed in the right direction", "job_security", "positive", 7),
    _h("fired_1", "Report: {TEAM_FULL} ready to part ways with {COACH}", "fired", "negative", 10),
    _h("fired_2", "Is {COACH_LAST} done after going {RECORD}?", "fired", "negative", 9),
    _h("fired_3", "Search firms already calling about the {TEAM} job", "fired", "negative", 7),
    _h("hired_1", "{TEAM_FULL} tab {COACH} as {ROLE}", "hired", "positive", 10),
    _h("hired_2", "New era: {COACH_LAST} arrives in {CONFERENCE} country", "hired", "positive", 8),
    _h("hired_3", "{COACH}, {AGE}, lands {ROLE} job with {TEAM}", "hired", "neutral", 7),
    _h("hunt_1", "{COACH}, {AGE}, still waiting on the right call", "job_hunt", "neutral", 10),
    _h("hunt_2", "Coaching clinic notebook: {COACH_LAST} working the room", "job_hunt", "neutral", 8),
    _h("hunt_3", "Young coach {COACH} weighing {first offers|the options|a move}", "job_hunt", "neutral", 6),
    # calendar
    _h("recruit_1", "{TEAM} land {POSITION} {PLAYER} on signing day", "recruiting", "positive", 10),
    _h("recruit_2", "{COACH_LAST} hits the road for the {YEAR} class", "recruiting", "neutral", 8),
    _h("recruit_3", "Signing day surprise: {PLAYER} picks the {TEAM}", "recruiting", "positive", 7),
    _h("pre_1", "{TEAM} open camp with {big questions|real optimism|a quiet confidence}", "preseason", "neutral", 10),
    _h("pre_2", "Preseason poll: {TEAM} open the year {RANKING}", "preseason", "neutral", 7),
    _h("pre_3", "{CONFERENCE} media days: {COACH_LAST} talks {PLAYER}", "preseason", "neutral", 8),
    _h("bowl_1", "{TEAM} headed to the {BOWL}", "bowl_selection", "positive", 10),
    _h("bowl_2", "{BOWL_CITY} bound: {TEAM} accept {BOWL} bid", "bowl_selection", "positive", 8),
    _h("playoff_1", "{RANKING} {TEAM} punch a ticket to the postseason", "playoff", "positive", 10),
    _h("champ_1", "{TEAM} one win from a title", "championship", "positive", 10),
    _h("champ_2", "Everything on the line: {TEAM} and the {BOWL}", "championship", "positive", 8),
    # general
    _h("gen_1", "{TEAM} sit at {RECORD} in the {CONFERENCE}", "general", "neutral", 10),
    _h("gen_2", "Inside the {TEAM} program with {COACH}", "general", "neutral", 8),
    _h("gen_3", "{YEAR} {PHASE} notebook: {TEAM} {keep grinding|look ahead|take stock}", "general", "neutral", 7),
    _h("gen_4", "{PLAYER} emerging as a leader for the {TEAM}", "general", "positive", 6),
]


# ──────────────────────────────────────────────
# SCENES
# ──────────────────────────────────────────────

def _s(id_, phase, context, title, description, tone="neutral", weight=5):
    return SceneTemplate(id_, phase, context, title, description, tone, weight)


SCENES: List[SceneTemplate] = [
    # preseason
    _s("pre_new_1", "preseason", "new_job", "First Camp",
       "The whistle around your neck still feels new. Players study you the way you study film, "
       "looking for tells. {PLAYER} is the first to knock on your office door, asking what the "
       "{TEAM} are going to be under you.", "hopeful", 8),
    _s("pre_new_2", "preseason", "new_job", "New Name on the Door",
       "Maintenance finished painting your name on the office door this morning. The {CONFERENCE} "
       "schedule is taped to the wall and the depth chart is written in pencil. Everything here is "
       "{provisional|unproven|up for grabs}.", "hopeful", 7),
    _s("pre_win_1", "preseason", "winning", "Great Expectations",
       "Preseason magazines have the {TEAM} near the top again. Last year's {RECORD} finish raised "
       "the bar, and every practice now carries the weight of it. {PLAYER} is the name on every "
       "cover.", "tense", 8),
    _s("pre_win_2", "preseason", "winning", "Media Day",
       "Cameras crowd the podium at {CONFERENCE} media day. The questions are about titles, not "
       "bowl eligibility. You answer carefully; confidence sells, but a quote can live forever.",
       "hopeful", 7),
    _s("pre_lose_1", "preseason", "losing", "Clean Slate",
       "Nobody is picking the {TEAM} for anything this fall, and the locker room knows it. Young "
       "players who sat last season are getting reps. There is something {freeing|honest|useful} "
       "about low expectations.", "hopeful", 8),
    _s("pre_lose_2", "preseason", "losing", "Proving Ground",
       "The summer was spent hearing what this team cannot do. Camp opens in the heat with a "
       "roster full of questions and one clear answer: {PLAYER} at {POSITION}.", "tense", 6),
    # game blocks
    _s("gb_win_1", "game_block", "winning", "Momentum",
       "At {RECORD}, the {TEAM} are playing with the confidence of a team that expects to win. "
       "The last game ended {SCORE} and the bus ride home was loud. Practice this week is crisp.",
       "triumphant", 8),
    _s("gb_win_2", "game_block", "winning", "Target on the Back",
       "Winning has a cost: every opponent now circles the {TEAM} on the schedule. Your staff "
       "wants to guard against a letdown; your players want to keep their foot on the gas.",
       "tense", 6),
    _s("gb_lose_1", "game_block", "losing", "The Skid",
       "The film room is quiet. {RECORD} is not what anyone signed up for, and the {SCORE} loss to "
       "{OPPONENT} keeps replaying. Someone has to say something in the team meeting.", "worried", 8),
    _s("gb_lose_2", "game_block", "losing", "Searching",
       "You have tried new tempo, new personnel, new speeches. The {TEAM} are {RECORD} and the "
       "local paper has started counting the weeks. {PLAYER} asks for a word after practice.",
       "worried", 7),
    _s("gb_mixed_1", "game_block", "mixed", "Middle of the Pack",
       "At {RECORD} the season could still go either way. The {CONFERENCE} race is wide open and "
       "so is the question of who these {TEAM} really are.", "neutral", 8),
    _s("gb_mixed_2", "game_block", "mixed", "Week to Week",
       "One good Saturday, one bad one. The staff meeting runs long as coordinators argue about "
       "what the {SCORE} result against {OPPONENT} actually meant.", "neutral", 6),
    _s("gb_hot_1", "game_block", "hot_seat", "Under the Microscope",
       "The athletic director came to practice today and said very little. Nothing more was needed. "
       "At {RECORD}, every snap the {TEAM} take is being graded by people who sign your checks.",
       "tense", 9),
    _s("gb_hot_2", "game_block", "hot_seat", "Boosters Calling",
       "Your phone lights up with numbers you recognize from the donor wall. The calls are polite. "
       "The subtext is not: the {TEAM} need to win now.", "worried", 7),
    # postseason
    _s("post_bowl_1", "postseason", "bowl_prep", "{BOWL} Week",
       "{BOWL_CITY} rolls out the welcome mat for the {TEAM}. Between the banquets and the "
       "sponsor events you still have a game to win, and {OPPONENT} will not care about your "
       "itinerary.", "hopeful", 8),
    _s("post_bowl_2", "postseason", "bowl_prep", "Extra Practices",
       "Bowl season means fifteen more practices, a gift for the young players. The seniors want "
       "one more win at {RECORD}; the underclassmen are auditioning for next year.", "neutral", 7),
    _s("post_playoff_1", "postseason", "playoff_prep", "Bracket Season",
       "The {TEAM} are {RANKING} and still alive. Every meeting feels heavier now; every mistake "
       "in practice gets corrected twice.", "tense", 8),
    _s("post_champ_1", "postseason", "championship", "One Game",
       "Everything the {TEAM} built at {RECORD} comes down to one night in {BOWL_CITY}. The "
       "players are calm. You are trying to look calm.", "tense", 8),
    # carousel
    _s("car_fired_1", "carousel", "fired", "The Meeting",
       "The AD's office was colder than usual. The words were rehearsed; your response was not. "
       "By afternoon the {TEAM} had a press release and you had a box of office belongings.",
       "worried", 9),
    _s("car_fired_2", "carousel", "fired", "Unemployed",
       "The phone rings less now. You spend mornings rewatching {YEAR} film and afternoons "
       "calling old friends. Somewhere a program needs a {ROLE} with something to prove.",
       "worried", 7),
    _s("car_hot_1", "carousel", "hot_seat", "Coaching Carousel",
       "The carousel is spinning and your name is in the rumor mill, for better and for worse. "
       "Agents call; reporters call; your own AD does not.", "tense", 8),
    _s("car_hot_2", "carousel", "hot_seat", "Leverage",
       "A {RECORD} season leaves you with less leverage than you want. Still, interest is "
       "interest, and a {ROLE} at {AGE} has time to {rebuild|reinvent|start over}.",
       "neutral", 6),
    _s("car_secure_1", "carousel", "secure", "In Demand",
       "Athletic directors are asking about you by name. The {TEAM} would like you to stay; other "
       "schools would like you to listen. Your agent would like both.", "hopeful", 8),
    _s("car_secure_2", "carousel", "secure", "Options",
       "For once the question is not whether you will have a job but which one. Loyalty to the "
       "{TEAM} pulls one way, a bigger stage pulls the other.", "hopeful", 7),
    # no current job
    _s("car_hunt_1", "carousel", "job_hunt", "Foot in the Door",
       "A folder of resumes, a rented car, and a list of names. Nobody hands out coaching jobs; you "
       "have to be standing in the right hallway when one opens. At {AGE}, every hallway counts.",
       "hopeful", 8),
    _s("car_hunt_2", "carousel", "job_hunt", "Waiting by the Phone",
       "The {YEAR} hiring season moves fast. Head coaches fill staffs with people they trust, and "
       "you are still building that trust one {phone call|clinic|handshake} at a time.", "neutral", 7),
    # offseason
    _s("off_recruit_1", "offseason", "recruiting", "Signing Day",
       "Fax machines hum and phones buzz as the {YEAR} class comes together. {PLAYER}, a "
       "{POSITION}, is the name the {TEAM} faithful will remember.", "hopeful", 8),
    _s("off_recruit_2", "offseason", "recruiting", "On the Road",
       "Living rooms, high school gyms, airport rental counters. Recruiting is the job behind the "
       "job, and for the {TEAM} this winter it is {going well|a grind|a scramble}.", "neutral", 7),
    _s("off_win_1", "offseason", "winning", "Winter Conditioning",
       "Coming off {RECORD}, the weight room is full at six in the morning without anyone being "
       "told. Success has its own gravity.", "triumphant", 7),
    _s("off_lose_1", "offseason", "losing", "Reckoning",
       "The offseason is for honesty. {RECORD} demands changes: in scheme, in staff, maybe in "
       "you. The {TEAM} are waiting to see which.", "worried", 7),
]

# Used when a phase/context bucket is empty
FALLBACK_SCENES: Dict[str, tuple] = {
    "preseason": ("Fall Camp", "Two-a-days begin for the {TEAM}. The season is close enough to taste."),
    "game_block": ("Game Week", "Another week, another opponent. The {TEAM} sit at {RECORD}."),
    "postseason": ("Postseason", "The regular season is over. The {TEAM} finished {RECORD}."),
    "carousel": ("The Carousel", "Jobs open and close by the hour. You are {AGE} and the phone is your lifeline."),
    "offseason": ("The Offseason", "The stadium is quiet. The work for the {YEAR} season starts now."),
}


# ──────────────────────────────────────────────
# CHOICE SETS
# ──────────────────────────────────────────────

def _c(id_, text, description, risk, effects, type_="action"):
    return ChoiceTemplate(id_, text, description, risk, dict(effects), type_)


CHOICE_SETS: List[ChoiceSet] = [
    ChoiceSet("gm_fourth_down", "game_management",
              "Fourth down in plus territory on the opening drive.", [
                  _c("gm_kick", "Kick the field goal", "Take the points and settle in.", "safe",
                     {"security": 1, "team_morale": -2}),
                  _c("gm_go", "Go for it", "Tell the offense you trust them.", "risky",
                     {"security": -3, "team_morale": 5, "fan_support": 3}),
              ]),
    ChoiceSet("gm_tempo", "game_management",
              "The offense looks sluggish after halftime.", [
                  _c("gm_hurry", "Go no-huddle", "Speed the game up and force mismatches.", "moderate",
                     {"team_morale": 3, "media_perception": 2}),
                  _c("gm_grind", "Shorten the game", "Run the ball, bleed the clock.", "safe",
                     {"security": 2, "fan_support": -2}, "strategy"),
              ]),
    ChoiceSet("pd_curfew", "player_discipline",
              "Two starters missed curfew the night before a road game.", [
                  _c("pd_bench", "Sit them for the first half", "Rules are rules.", "moderate",
                     {"team_morale": 4, "media_perception": 3}),
                  _c("pd_private", "Handle it privately", "Keep it in the building.", "safe",
                     {"team_morale": -2, "security": 1}, "dialogue"),
              ]),
    ChoiceSet("pd_social", "player_discipline",
              "A player's post about the coaching staff is going viral.", [
                  _c("pd_meet", "Meet with the player one on one", "Hear them out before reacting.", "safe",
                     {"team_morale": 3}, "dialogue"),
                  _c("pd_suspend", "Suspend the player", "Send a message to the locker room.", "risky",
                     {"team_morale": -4, "media_perception": 4}),
              ]),
    ChoiceSet("mr_presser", "media_response",
              "A columnist questioned your play-calling in print.", [
                  _c("mr_deflect", "Deflect with humor", "Give them nothing to run with.", "safe",
                     {"media_perception": 3}, "dialogue"),
                  _c("mr_fire_back", "Fire back at the podium", "Defend your staff, loudly.", "risky",
                     {"media_perception": -5, "team_morale": 4, "fan_support": 2}, "dialogue"),
              ]),
    ChoiceSet("mr_rumor", "media_response",
              "Reporters ask about rumors tying you to another job.", [
                  _c("mr_deny", "Deny it flatly", "Commit publicly to the program.", "moderate",
                     {"fan_support": 4, "security": 2}, "dialogue"),
                  _c("mr_no_comment", "No comment", "Keep your options open.", "moderate",
                     {"fan_support": -3, "media_perception": -1}, "dialogue"),
              ]),
    ChoiceSet("rd_flip", "recruiting_decision",
              "A top prospect committed elsewhere is wavering.", [
                  _c("rd_visit", "Make an in-home visit", "Get in the living room before anyone else.", "moderate",
                     {"recruiting": 5}),
                  _c("rd_respect", "Respect the commitment", "Keep your reputation clean.", "safe",
                     {"media_perception": 2, "recruiting": -1}),
              ]),
    ChoiceSet("rd_juco", "recruiting_decision",
              "Depth is thin at a key position and signing day is close.", [
                  _c("rd_transfer", "Take a junior college transfer", "Plug the hole now.", "moderate",
                     {"recruiting": 2, "development": -2}),
                  _c("rd_develop", "Trust the young players", "Build it the slow way.", "safe",
                     {"development": 4, "security": -1}, "strategy"),
              ]),
    ChoiceSet("sm_coordinator", "staff_management",
              "The other coordinator keeps overriding your calls in meetings.", [
                  _c("sm_confront", "Confront them privately", "Clear the air before it spreads.", "moderate",
                     {"team_morale": 2, "security": -1}, "dialogue"),
                  _c("sm_head_coach", "Take it to the head coach", "Let the boss settle it.", "risky",
                     {"security": -3, "media_perception": 1}, "dialogue"),
              ]),
    ChoiceSet("sm_grad_assistant", "staff_management",
              "A graduate assistant built a cut-up that changed your game plan.", [
                  _c("sm_credit", "Give the GA credit in the staff room", "Loyalty is built in small moments.", "safe",
                     {"team_morale": 3}, "dialogue"),
                  _c("sm_keep", "Keep it quiet", "Your name is on the call sheet.", "moderate",
                     {"security": 1, "team_morale": -2}, "dialogue"),
              ]),
    ChoiceSet("pdir_identity", "program_direction",
              "The staff wants a clear identity for the season.", [
                  _c("pdir_physical", "Build a physical, run-first team", "Win the line of scrimmage.", "safe",
                     {"development": 3, "security": 1}, "strategy"),
                  _c("pdir_spread", "Spread it out", "Put the ball in playmakers' hands.", "moderate",
                     {"recruiting": 3, "fan_support": 3}, "strategy"),
              ]),
    ChoiceSet("pdir_facilities", "program_direction",
              "Boosters offer money if you push for a new football facility.", [
                  _c("pdir_push", "Lead the campaign", "Facilities win recruits.", "moderate",
                     {"recruiting": 4, "security": 2}),
                  _c("pdir_focus", "Stay focused on football", "Let the AD handle fundraising.", "safe",
                     {"development": 2, "fan_support": -1}),
              ]),
    ChoiceSet("hs_response", "hot_seat_response",
              "The athletic director wants a plan, in writing, by Friday.", [
                  _c("hs_overhaul", "Overhaul the staff", "Fire a coordinator and show urgency.", "risky",
                     {"security": 4, "team_morale": -5}),
                  _c("hs_stay_course", "Stay the course", "Point to the young talent.", "moderate",
                     {"security": -2, "development": 3}, "dialogue"),
              ]),
    ChoiceSet("hs_agent", "hot_seat_response",
              "Your agent says two schools want to talk.", [
                  _c("hs_listen", "Take the calls", "Knowing your market is not disloyal.", "moderate",
                     {"security": -2, "recruiting": -1}, "dialogue"),
                  _c("hs_decline_talks", "Shut it down", "Commit to finishing what you started.", "safe",
                     {"fan_support": 4}, "dialogue"),
              ]),
    ChoiceSet("gp_script", "game_planning",
              "You are scripting the first fifteen plays.", [
                  _c("gp_aggressive", "Open with shots downfield", "Set the tone early.", "risky",
                     {"media_perception": 3, "security": -1}, "strategy"),
                  _c("gp_balanced", "Stay balanced", "Let the script reveal their adjustments.", "safe",
                     {"security": 2}, "strategy"),
              ]),
    ChoiceSet("gp_blitz", "game_planning",
              "Their quarterback struggles against pressure on film.", [
                  _c("gp_bring_heat", "Bring the blitz", "Make the quarterback uncomfortable all day.", "risky",
                     {"team_morale": 4, "security": -2}, "strategy"),
                  _c("gp_coverage", "Drop eight into coverage", "Make the quarterback throw into windows.", "moderate",
                     {"security": 1}, "strategy"),
              ]),
    ChoiceSet("sv_grind", "survival",
              "Sixteen-hour days, no raise, and a boss who barely knows your name.", [
                  _c("sv_film", "Outwork everyone in the film room", "Be the one with the answers.", "safe",
                     {"development": 3, "security": 2}),
                  _c("sv_network", "Work the coaching clinic circuit", "Make sure people know your name.", "moderate",
                     {"recruiting": 2, "media_perception": 2}),
              ]),
    ChoiceSet("sv_credit", "survival",
              "Your position group is thriving and the coordinator is taking credit.", [
                  _c("sv_swallow", "Let it go", "Your time will come.", "safe",
                     {"security": 2}, "dialogue"),
                  _c("sv_speak_up", "Make sure the head coach knows", "Nobody gets promoted quietly.", "risky",
                     {"security": -2, "media_perception": 2}, "dialogue"),
              ]),
]

ROLE_CHOICE_CONTEXTS: Dict[str, List[str]] = {
    "head_coach": ["program_direction", "game_management", "player_discipline", "media_response"],
    "coordinator": ["game_planning", "staff_management", "survival"],
    "entry": ["survival", "recruiting_decision"],
}

PHASE_CHOICE_CONTEXTS: Dict[str, str] = {
    "game_block": "game_management",
    "carousel": "hot_seat_response",
    "offseason": "recruiting_decision",
    "preseason": "program_direction",
}


# ──────────────────────────────────────────────
# BUZZ, STAFF NOTES, TICKER
# ──────────────────────────────────────────────

BUZZ_LINES: Dict[str, List[str]] = {
    "positive": [
        "Message board thread titled 'In {COACH_LAST} We Trust' passes 40 pages.",
        "Local sports radio caller: 'I have not felt this good about the {TEAM} in years.'",
        "Season ticket renewals for the {TEAM} are {up|way up|ahead of last year}.",
        "National analysts start using the word 'sleeper' about the {TEAM}.",
    ],
    "negative": [
        "A plane towing a banner circles the stadium. Nobody will say who paid for it.",
        "Radio host: '{RECORD} is not acceptable at a place like this.'",
        "Fans leave early again; the student section is half empty by the fourth quarter.",
        "Anonymous booster quoted: 'We are watching closely.'",
    ],
    "neutral": [
        "Beat writer notes the {TEAM} depth chart is still {in flux|written in pencil|a work in progress}.",
        "{PLAYER} draws praise from teammates in the local paper.",
        "{CONFERENCE} coaches poll is out; opinions on the {TEAM} are split.",
        "Fans debate whether {COACH_LAST} should keep calling the plays.",
    ],
    "job_hunt": [
        "Industry chatter: {COACH} is a name to watch on the {YEAR} clinic circuit.",
        "A veteran coordinator on {COACH_LAST}: 'Sharp. Works. Just needs a shot.'",
        "Hiring season is {quiet|slow|frantic} for young assistants this year.",
    ],
}

STAFF_NOTES: Dict[str, List[str]] = {
    "preseason": [
        "{PLAYER} has looked sharp at {POSITION} in camp.",
        "Strength staff reports the team is in its best shape in years.",
        "We need a decision on the backup quarterback before the opener.",
    ],
    "game_block": [
        "Film shows we are {getting beat|giving up too much|leaking yards} on third down.",
        "{PLAYER} is playing through a nagging injury. Monitor the reps.",
        "Scout team did a great job simulating {OPPONENT}'s looks this week.",
    ],
    "postseason": [
        "Bowl practices are a chance to get the redshirts real reps.",
        "Travel party is finalized for {BOWL_CITY}.",
    ],
    "carousel": [
        "Two staff members have been contacted by other programs.",
        "Recruits are asking whether you will be here next year.",
    ],
    "offseason": [
        "{PLAYER} is the highest-rated signee in the {YEAR} class.",
        "Spring practice schedule is ready for your review.",
        "Academic staff flags three players for summer school.",
    ],
    # notes to self while between jobs
    "job_hunt": [
        "Call back the two coordinators who said to keep in touch.",
        "Finish the {YEAR} cut-ups before the clinic next week.",
        "Update the playbook binder. Somebody will ask to see it.",
    ],
}

# League-wide ticker; no program-specific tokens
TICKER_LINES: List[str] = [
    "Commissioners meet to discuss {scheduling|realignment|bowl tie-ins}.",
    "Around the country: three head coaches already on the hot seat.",
    "Bowl projections shuffle after a wild weekend.",
    "Recruiting services update their {YEAR} rankings.",
    "NFL scouts crowd the press box at a midweek practice.",
    "Injury reports pile up across the country.",
    "Athletic directors compile short lists as the {YEAR} carousel takes shape.",
]


# ──────────────────────────────────────────────
# RESOLUTIONS
# ──────────────────────────────────────────────

RESOLUTION_LINES: Dict[str, List[str]] = {
    "choice": [
        "You chose to {action}. {impact}",
        "The decision to {action} is made. {impact}",
    ],
    "custom": [
        "You decided to {action}. The {TEAM} will find out soon whether it was the right call.",
        "'{action}.' Word travels fast in a football building.",
    ],
    "advance": [
        "The calendar turns. It is {PHASE} now.",
        "Another chapter begins for {COACH_LAST}.",
    ],
}


def find_choice(choice_id: str) -> Optional[ChoiceTemplate]:
    for cs in CHOICE_SETS:
        for c in cs.choices:
            if c.id == choice_id:
                return c
    return None


def headlines_by_category(category: str) -> List[HeadlineTemplate]:
    return [h for h in HEADLINES if h.category == category]


def scenes_for(phase: str, context: str) -> List[SceneTemplate]:
    return [s for s in SCENES if s.phase == phase and s.context == context]


def choice_sets_for(context: str) -> List[ChoiceSet]:
    return [cs for cs in CHOICE_SETS if cs.context == context]
