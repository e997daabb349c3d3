"""
Agent registry used by the match runner and the CLI.
"""

from __future__ import annotations

from typing import Optional

from agents.human_agent import HumanAgent
from agents.mcts_agent import MCTSAgent
from agents.protocol import AgentProtocol
from agents.random_agent import RandomAgent
from uct import DEFAULT_EXPLORATION_BIAS

AGENT_TYPES = ("mcts", "random", "human")


def build_agent(
    agent_type: str,
    game_name: str,
    iterations: int = 1000,
    exploration_bias: float = DEFAULT_EXPLORATION_BIAS,
    seed: Optional[int] = None,
) -> AgentProtocol:
    agent_type = agent_type.lower()
    if agent_type == "mcts":
        return MCTSAgent(iterations=iterations, exploration_bias=exploration_bias, seed=seed)
    if agent_type == "random":
        return RandomAgent(seed=seed)
    if agent_type == "human":
        return HumanAgent(game_name)
    raise ValueError(f"Unknown agent type: {agent_type}")
