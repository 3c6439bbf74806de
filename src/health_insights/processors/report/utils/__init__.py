from .parsing import parse_number, round_half_up, to_int, compact_number

__all__ = ["parse_number", "round_half_up", "to_int", "compact_number"]
