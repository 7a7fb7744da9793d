"""
Process-wide settings for the expression kernel.

The tree walks read the active configuration at call time; any explicit
argument passed to ``render``/``derive`` takes precedence over it.
"""

from dataclasses import dataclass, fields, replace
from typing import Optional

EXP_RULES = ('chain', 'legacy')


@dataclass(frozen=True)
class KernelConfig:
    render_precision: int = 6     # digits after the decimal point for constants
    exp_rule: str = 'chain'       # 'legacy' gives d/dx exp(u) = exp(u) + u'
    binary_rules: bool = True     # False: deriving + - * / raises DerivationError

    def __post_init__(self):
        if isinstance(self.render_precision, bool) or not isinstance(self.render_precision, int):
            raise ValueError(f"render_precision must be an int, got {self.render_precision!r}")
        if self.render_precision < 0:
            raise ValueError(f"render_precision must be >= 0, got {self.render_precision}")
        if self.exp_rule not in EXP_RULES:
            raise ValueError(f"exp_rule must be one of {EXP_RULES}, got {self.exp_rule!r}")
        if not isinstance(self.binary_rules, bool):
            raise ValueError(f"binary_rules must be a bool, got {self.binary_rules!r}")


_config: Optional[KernelConfig] = None


def get_config() -> KernelConfig:
    """Get or create the global configuration"""
    global _config
    if _config is None:
        _config = KernelConfig()
    return _config


def configure(**overrides) -> KernelConfig:
    """Replace selected settings of the global configuration"""
    global _config
    known = {f.name for f in fields(KernelConfig)}
    unknown = set(overrides) - known
    if unknown:
        raise ValueError(f"Unknown configuration keys: {sorted(unknown)}")
    _config = replace(get_config(), **overrides)
    return _config


def reset_config() -> KernelConfig:
    global _config
    _config = KernelConfig()
    return _config
