"""
rulechain/core/config.py
========================
Global configuration for RuleChain.
All tunables in one place.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class EngineConfig:
    max_passes: int  = 100    # safety valve; fixpoint is normally reached far earlier
    log_trace:  bool = True   # mirror trace events to the module logger at DEBUG

    def __post_init__(self):
        if self.max_passes < 1:
            raise ValueError(f"max_passes must be >= 1, got {self.max_passes}")


@dataclass
class ServerConfig:
    host:    str           = "0.0.0.0"
    port:    int           = 8000
    reload:  bool          = False
    example: Optional[str] = None   # knowledge base preloaded at startup


@dataclass
class RuleChainConfig:
    engine: EngineConfig = field(default_factory=EngineConfig)
    server: ServerConfig = field(default_factory=ServerConfig)

    @classmethod
    def for_example(cls, key: str) -> "RuleChainConfig":
        """Config that boots the server with a bundled knowledge base."""
        cfg = cls()
        cfg.server.example = key
        return cfg


# Singleton default config
DEFAULT_CONFIG = RuleChainConfig()
