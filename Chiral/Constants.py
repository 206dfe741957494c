#!/usr/bin/env python3
"""
Physical constants and low-energy constants.
Masses and lengths are given both in MeV and in fm (natural units, hbar=c=1).
"""
import numpy as np
from scipy.constants import physical_constants

pi = np.pi
hc = physical_constants['reduced Planck constant times c in MeV fm'][0]
m_n = physical_constants['neutron mass energy equivalent in MeV'][0]
m_p = physical_constants['proton mass energy equivalent in MeV'][0]
m_nucl = (m_p + m_n)*0.5
reduced_nucleon_mass_MeV = m_nucl*0.5

nucleon_mass_fm = m_nucl / hc
reduced_nucleon_mass_fm = reduced_nucleon_mass_MeV / hc

# isospin averaged pion mass and pion decay constant
pion_mass_MeV = 138.03
pion_decay_constant_MeV = 92.4
pion_mass_fm = pion_mass_MeV / hc
pion_decay_constant_fm = pion_decay_constant_MeV / hc

gA = 1.267

# magnetic moments in units of nuclear magneton
mu_p = physical_constants['proton mag. mom. to nuclear magneton ratio'][0]
mu_n = physical_constants['neutron mag. mom. to nuclear magneton ratio'][0]
isoscalar_nucleon_magnetic_moment = (mu_p + mu_n)*0.5
isovector_nucleon_magnetic_moment = (mu_p - mu_n)*0.5
# e / 2 m_p with e = 1, in fm
nuclear_magneton_fm = 0.5 / (m_p / hc)

# LECs of the magnetic currents
d18_GeV = -0.97    # GeV^-2
d9_GeV = -0.85     # GeV^-2
L2_fm = -0.05      # fm^4
d18_fm = d18_GeV * 1.e-6 * hc**2
d9_fm = d9_GeV * 1.e-6 * hc**2
