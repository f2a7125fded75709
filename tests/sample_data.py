"""Sample school records shared across test modules."""

IOWA_STATE_GUID = "05024756-765e-41a9-89d7-1407436d9a58"
MISSING_GUID = "00000000-0000-0000-0000-000000000000"

SAMPLE_WIRE = [
    {
        "guid": IOWA_STATE_GUID,
        "school": "Iowa State University",
        "mascot": "Cy the Cardinal",
        "nickname": "Cyclones",
        "location": "Ames, IA, USA",
        "latlong": "42.026111,-93.648333",
        "ncaa": "Division I",
        "conference": "Big 12 Conference",
    },
    {
        "guid": "e8b5a0c4-2f3b-4c3a-9b9a-1d2e3f4a5b6c",
        "school": "Test University",
        "mascot": "Test Mascot",
        "nickname": "Testers",
        "location": "Test City, ST, USA",
        "latlong": "0.0,0.0",
    },
    {
        "guid": "A1B2C3D4-E5F6-4789-ABCD-EF0123456789",
        "school": "Upper Case College",
        "mascot": "Shouty",
        "nickname": "Capitals",
        "location": "Caps, CA, USA",
        "latlong": "34.0,-118.0",
        "ncaa": "Division III",
    },
]
