"""
Core numeric kernel: deterministic rounding, exp2 and z-base-32 encoding.

Модули этого пакета не зависят от внешних систем и не имеют состояния.
"""
