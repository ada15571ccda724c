"""Landmarks and reference lines shared by the bundled analyses.

Coordinates follow image conventions: x grows towards the face profile,
y grows downwards.
"""

from .constructions import line, point

S = point("S", "Sella")
N = point("N", "Nasion")
A = point("A", "Subspinale (point A)")
B = point("B", "Supramentale (point B)")
Po = point("Po", "Porion")
Or = point("Or", "Orbitale")
Ar = point("Ar", "Articulare")
Go = point("Go", "Gonion")
Me = point("Me", "Menton")
Gn = point("Gn", "Gnathion")
Pog = point("Pog", "Pogonion")

UIT = point("UIT", "Upper incisor tip")
UIA = point("UIA", "Upper incisor apex")
LIT = point("LIT", "Lower incisor tip")
LIA = point("LIA", "Lower incisor apex")

Prn = point("Prn", "Pronasale")
Ls = point("Ls", "Labrale superius")
Li = point("Li", "Labrale inferius")
SoftPog = point("Pog'", "Soft tissue pogonion")

SN = line(S, N, "SN", "Sella-nasion line")
FH = line(Po, Or, "FH", "Frankfort horizontal")
MP = line(Go, Me, "MP", "Mandibular plane")
FacialPlane = line(N, Pog, "N-Pog", "Facial plane")
YAxis = line(S, Gn, "S-Gn", "Y axis")
U1Axis = line(UIA, UIT, "U1", "Long axis of the upper incisor")
L1Axis = line(LIA, LIT, "L1", "Long axis of the lower incisor")
ELine = line(SoftPog, Prn, "E", "Ricketts' esthetic line")
