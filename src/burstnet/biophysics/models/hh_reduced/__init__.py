from burstnet.biophysics.models.hh_reduced.model import (
    HHReducedModel,
    alpha_m,
    alpha_n,
    beta_m,
    beta_n,
    f_syn,
    m_inf,
    vtrap,
)

__all__ = [
    "HHReducedModel",
    "alpha_m",
    "alpha_n",
    "beta_m",
    "beta_n",
    "f_syn",
    "m_inf",
    "vtrap",
]
