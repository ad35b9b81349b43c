"""
ClimaTrack — Demo Site Configurations

Four locations chosen to exercise every proximity branch:
1. Lagos Island — coastal AND urban box
2. Lekki — coastal box only
3. Ibadan — inland city, no proximity penalty
4. Oslo — northern, cold-climate negative control
"""

DEMO_SITES = {
    "lagos_island": {
        "name": "Lagos Island, Nigeria",
        "lat": 6.4550,
        "lon": 3.3941,
        "description": "Dense commercial district on the lagoon. "
                       "Falls inside both the coastal and urban boxes.",
        "expected_quality": "moderate to poor in the wet season",
    },
    "lekki": {
        "name": "Lekki, Lagos, Nigeria",
        "lat": 6.4698,
        "lon": 3.5852,
        "description": "Coastal peninsula east of the urban core.",
        "expected_quality": "moderate",
    },
    "ibadan": {
        "name": "Ibadan, Oyo, Nigeria",
        "lat": 7.3775,
        "lon": 3.9470,
        "description": "Large inland city outside both bounding boxes.",
        "expected_quality": "moderate",
    },
    "oslo": {
        "name": "Oslo, Norway",
        "lat": 59.9139,
        "lon": 10.7522,
        "description": "Cold northern capital used as a low-risk control.",
        "expected_quality": "safe",
    },
}
