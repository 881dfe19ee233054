"""Linear (dot product) kernel."""

from .base import DirectKernel
from .factory import register_kernel
from ..representation.base import Vector


@register_kernel("linear")
class LinearKernel(DirectKernel):
    """
    Linear kernel on vector representations.
    
    k(a, b) = <a, b>
    
    Both representations must be of the same vector kind (dense or sparse).
    
    Parameters:
        representation: Name of the vector representation to compare
    """
    
    representation_type = Vector
    
    def kernel_computation(self, rep_a: Vector, rep_b: Vector) -> float:
        return rep_a.inner_product(rep_b)
