import numpy as np

def stream_from_seed(seed: int) -> np.random.Generator:
    # numpy only takes non-negative seeds; reuse the int32 bit pattern
    return np.random.default_rng(seed & 0xFFFFFFFF)
