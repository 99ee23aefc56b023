"""
Tests for bot action selection and the game loop.

Tests:
- Bots only pick legal actions
- Seeded bots are reproducible
- The game loop drives sessions and stops on budget
"""

import pytest

from ..bots import FactoryFirstPolicy, FirstLegalPolicy, RandomPolicy
from ..engine_core.action import Action, ActionType
from ..engine_core.action_generator import legal_actions
from ..engine_core.recipes import RecipeId
from ..games.britain import britain_setup
from ..session import GameLoop, LoopState, SessionManager


class TestPolicies:
    def test_random_bot_selects_legal(self, corridor, alice_state):
        legal = legal_actions(corridor, alice_state)
        bot = RandomPolicy(seed=42)
        for _ in range(20):
            assert bot.select_action(alice_state, legal).action in legal

    def test_random_bot_is_reproducible(self, corridor, alice_state):
        legal = legal_actions(corridor, alice_state)
        a, b = RandomPolicy(seed=9), RandomPolicy(seed=9)
        picks_a = [a.select_action(alice_state, legal).action for _ in range(10)]
        picks_b = [b.select_action(alice_state, legal).action for _ in range(10)]
        assert picks_a == picks_b

    def test_empty_legal_actions(self, alice_state):
        for bot in (RandomPolicy(), FirstLegalPolicy(), FactoryFirstPolicy()):
            with pytest.raises(ValueError):
                bot.select_action(alice_state, [])

    def test_first_legal(self, corridor, alice_state):
        decision = FirstLegalPolicy().select_action(alice_state, legal_actions(corridor, alice_state))
        assert decision.action == Action.roll_move("P1")
        assert FirstLegalPolicy().get_name() == "FirstLegalPolicy"

    def test_factory_first_prefers_crafting(self, corridor, alice_state):
        alice_state.players[0].raw.tea_leaf = 1
        decision = FactoryFirstPolicy().select_action(alice_state, legal_actions(corridor, alice_state))
        assert decision.action == Action.process_factory(RecipeId.TEA, "P1")

    def test_factory_first_rolls_once_per_turn(self, corridor, alice_state):
        bot = FactoryFirstPolicy()
        legal = legal_actions(corridor, alice_state)

        assert bot.select_action(alice_state, legal).action.action_type == ActionType.ROLL_MOVE
        assert bot.select_action(alice_state, legal).action.action_type == ActionType.END_TURN

        alice_state.turn += 1
        assert bot.select_action(alice_state, legal).action.action_type == ActionType.ROLL_MOVE

    def test_factory_first_takes_branch(self, fork_state):
        choices = [Action.choose_edge((0, 4), "P1"), Action.choose_edge((1, 3), "P1")]
        decision = FactoryFirstPolicy().select_action(fork_state, choices)
        assert decision.action == choices[0]


class TestGameLoop:
    @pytest.fixture
    def session(self, britain):
        return SessionManager().create_session(britain, britain_setup(seed=5))

    def test_missing_policy(self, session):
        with pytest.raises(ValueError, match="P2"):
            GameLoop(session, {"P1": RandomPolicy()})

    def test_run_spends_budget(self, session):
        loop = GameLoop(session, {"P1": RandomPolicy(1), "P2": RandomPolicy(2)})

        result = loop.run(max_actions=30)

        assert result.loop_state == LoopState.BUDGET_EXHAUSTED
        assert loop.state == LoopState.BUDGET_EXHAUSTED
        assert result.actions_taken == 30
        assert len(result.explanations) == 30
        assert len(session.actions) == 30
        assert result.events == session.event_log

    def test_factory_bots_advance_turns(self, session):
        loop = GameLoop(session, {"P1": FactoryFirstPolicy(), "P2": FactoryFirstPolicy()})
        loop.run(max_actions=40)
        assert session.state.turn > 1

    def test_step(self, session):
        loop = GameLoop(session, {"P1": FirstLegalPolicy(), "P2": FirstLegalPolicy()})
        decision, events = loop.step()
        assert decision.action == Action.roll_move("P1")
        assert events[0].payload["player_id"] == "P1"
