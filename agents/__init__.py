"""
Players that can take part in a match.
"""

from .human_agent import HumanAgent
from .mcts_agent import MCTSAgent
from .protocol import AgentProtocol
from .random_agent import RandomAgent
from .registry import AGENT_TYPES, build_agent

__all__ = [
    'AgentProtocol', 'MCTSAgent', 'RandomAgent', 'HumanAgent',
    'AGENT_TYPES', 'build_agent',
]
