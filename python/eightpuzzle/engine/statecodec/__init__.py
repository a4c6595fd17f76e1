from eightpuzzle.engine.statecodec.codec import StateCodec, StateKey

__all__ = ["StateCodec", "StateKey"]
