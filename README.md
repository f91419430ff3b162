# neonufft

Building blocks for non-uniform fast Fourier transforms (NUFFT), written on
top of numpy.

## Modules

- `neonufft.options`: the `Options` dataclass holds the transform settings:
  `tol` (default `0.001`), `upsampfac` (`2.0`), `recenter_threshold` (`0.1`),
  `num_threads` (`0`), `sort_input` and `sort_output` (`True`),
  `kernel_approximation` (`False`), `order` (a `ModeOrder`, `FFT` or `CMCL`,
  default `CMCL`) and `kernel_type` (a `KernelType`, only `ES`).
  `INT_DTYPE` is the integer type used for sizes and indices (`int64`).
- `neonufft.kernel_param`: `KernelParameters.from_tolerance(tol, upsampfac,
  kernel_approximation)` works out the kernel width `n_spread` (kept between 2
  and 16) and the exponential-of-semicircle parameters `es_halfwidth`, `es_c`
  and `es_beta`. `spread_padding(n_spread)` gives the padding a spreading grid
  needs on each side (`n_spread // 2 + 2`).
- `neonufft.zorder`: Morton (z-order) comparison of 1 to 3 dimensional points
  whose coordinates lie in `[0, 1]`, in single or double precision:
  `less_0_1(lhs, rhs, dtype)`, plus `zorder_key(point, dtype)`, an
  interleaved-bit key that sorts the same way. `convert_to_key` and `less_msb`
  are the bit-level helpers. `Point` (coordinates plus original index) and
  `PartitionGroup` (`begin`, `size`, `end`) are plain records.
- `neonufft.view`: index arithmetic for column-major strided layouts:
  `view_size`, `view_index`, `is_contiguous`, `all_less`, `all_equal`.
- `neonufft.memory`: `HostArray(shape, dtype)` is a zero-initialised,
  column-major array whose first dimension is padded so each inner slice is
  aligned. It offers `shape()`, `strides()`, `size()`, `is_contiguous()`,
  `view()` (a numpy view), `reset(shape)`, `zero()`, `slice_view(i)`,
  `sub_view(offset, shape)` and item access. `copy(source, dest)` copies
  between arrays or views of the same shape. `aligned_alloc_size` and
  `padding_for_vectorization` expose the padding rules.
- `neonufft.fft_grid`: `FFTGrid(num_threads, shape, sign, padding, dtype)` is
  a 1 to 3 dimensional complex grid surrounded by padding. `transform()`
  replaces the inner grid by its unnormalised DFT, with exponent sign `sign`
  (`-1` or `+1`). `view()` is the inner grid, `padded_view()` the whole one.
- `neonufft.thread_pool`: `ThreadPool(num_threads)` runs
  `parallel_for(block_range, func, iter_block_size=None)`, calling
  `func(thread_id, block)` for blocks of a `BlockRange`. The calling thread
  takes part as thread 0; a `num_threads` below 1 uses the CPU count. An
  exception raised in any thread is re-raised in the caller once all threads
  have finished. The pool is a context manager; `close()` stops the workers.
- `neonufft.errors`: the exception hierarchy rooted at `GenericError`
  (`InputError`, `InternalError`, `MemoryAllocError`,
  `NotImplementedFeatureError`, `GPUError`, `GPUFFTError`). Each exception's
  `error_code()` returns an `ErrorCode`.

## What it does not do

The package has no transform plans: there is no type 1, type 2 or type 3
non-uniform transform, and no spreading, interpolation or kernel evaluation
on grids. It provides the parts such transforms are built from. There is no
GPU support and no command-line program.

## Installation

```
pip install .
```

## Example

```python
import numpy as np

from neonufft.fft_grid import FFTGrid
from neonufft.kernel_param import KernelParameters, spread_padding
from neonufft.thread_pool import BlockRange, ThreadPool

params = KernelParameters.from_tolerance(1e-6, 2.0, False)
pad = spread_padding(params.n_spread)

grid = FFTGrid(1, (64, 32), -1, (pad, pad), np.complex128)
grid.view()[0, 0] = 1.0
grid.transform()          # the inner grid now holds all ones

results = []
with ThreadPool(4) as pool:
    pool.parallel_for(BlockRange(0, 100),
                      lambda thread_id, r: results.append((r.begin, r.end)))
```

## Running the tests

```
pip install ".[test]"
pytest
```