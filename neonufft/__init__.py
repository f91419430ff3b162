"""Building blocks for non-uniform fast Fourier transforms: options, kernel
parameters, z-order comparison, strided host arrays, FFT grids, a
block-parallel thread pool and the library's exceptions."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "options",
    "kernel_param",
    "zorder",
    "view",
    "memory",
    "fft_grid",
    "thread_pool",
]