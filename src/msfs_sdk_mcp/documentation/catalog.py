"""
Name: Documentation catalog.
Description: Static lookup tables for the documentation site: search scope parameters, path keywords, and the embedded section titles and glossary terms returned by list_category_items.
"""

from types import MappingProxyType

from ..models import PathCategory, ScopeCategory

# Value of the site's "agt" search parameter per scope; empty means omitted
SCOPE_PARAMETERS = MappingProxyType(
    {
        ScopeCategory.CONTENTS: "",
        ScopeCategory.INDEX: "index",
        ScopeCategory.GLOSSARY: "glossary",
        ScopeCategory.ALL: "index",
    }
)

# Checked in order, first match wins
PATH_KEYWORDS = (
    ("Aircraft", PathCategory.AIRCRAFT),
    ("Scenery", PathCategory.SCENERY),
    ("SimVars", PathCategory.SIMVARS),
    ("Panel", PathCategory.PANELS),
    ("Missions", PathCategory.MISSIONS),
    ("Packaging", PathCategory.PACKAGING),
    ("Tools", PathCategory.TOOLS),
)

SECTION_TITLES = (
    "Introduction",
    "SDK Contents",
    "SDK Overview",
    "Using The SDK",
    "SDK EULA",
    "Release Notes",
    "Samples, Schemas, Tutorials and Primers",
    "Developer Mode",
    "Menus",
    "The Project Editor",
    "The Scenery Editor",
    "The Material Editor",
    "The Script Editor",
    "The Aircraft Editor",
    "Aircraft Debug Menu",
    "The Aircraft Tab",
    "The Flight Model Tab",
    "The AI Tab",
    "The Cockpit Tab",
    "The Gameplay Tab",
    "The Engines Tab",
    "The Systems Tab",
    "The Cameras Tab",
    "The Custom Parameters Tab",
    "The Visual Effects Editor",
    "External Asset Creation",
    "Content Configuration",
    "Programming APIs",
    "Additional Information",
    "How To Create An Aircraft",
    "World Hub",
)

GLOSSARY_TERMS = (
    "ADC",
    "add-ons",
    "ADF",
    "ADI",
    "ADPCM",
    "AFM",
    "AGL",
    "AH",
    "AHRS",
    "ambisonic",
    "AMSL",
    "AoA",
    "AOC",
    "API",
    "APU",
    "ATC",
    "BGL",
    "bpp",
    "Camber",
    "CAS",
    "CFD",
    "CG",
    "CGL",
    "Chord",
    "CoL",
    "dB",
    "dBTP",
    "DDS",
    "de-crab",
    "DEM",
    "Dihedral",
    "DME",
    "DoF",
    "DRM",
    "EAS",
    "ECU",
    "EGT",
    "ELT",
    "EPR",
    "FAF",
    "FIS",
    "FL",
    "flaps",
    "FLC",
    "FOV",
    "FSUIPC",
    "ft",
    "ftlbs",
    "GA",
    "Gallon",
    "GDI+",
    "glTF",
    "GPS",
    "GPWS",
    "GUID",
    "hp",
    "hPa",
    "IAF",
    "IAS",
    "ICAO",
    "ICAO code",
    "ICU",
    "IFR",
    "ILS",
    "Incidence",
    "inHg",
    "ISA",
    "ITT",
    "kcas",
    "kias",
    "Knot",
    "ktas",
    "lbf",
    "lbs",
    "LDA",
    "LKFS",
    "LOD",
    "LU",
    "MAC",
    "Mach",
    "Makefile",
    "MFD",
    "MOI",
    "mph",
    "MSL",
    "MTOW",
    "N1",
    "N2",
    "NDB",
    "nm",
    "OOI",
    "OSM",
    "Oswald Efficiency Factor",
    "Pa",
    "pbh",
    "PBR",
    "PCM",
    "Percent Over 100",
    "PFD",
    "PID",
    "POH",
    "POI",
    "psf",
    "psi",
    "quadkey",
    "Rankine",
    "RNAV",
    "ROC",
    "RPM",
    "RTO",
    "RTPC",
    "SDF",
    "slug",
    "Slug sqft",
    "sqft",
    "STOL",
    "Sweep",
    "Tacan",
    "TAS",
    "TCAS",
    "TIN",
    "TOGA",
    "Twist",
    "UI",
    "VASI",
    "VFR",
    "VFS",
    "VMO",
    "VOR",
    "WASM",
    "WEP",
    "Zulu Time",
)

# The index and the table of contents list the same top-level sections
CATEGORY_ITEMS = MappingProxyType(
    {
        "index": SECTION_TITLES,
        "contents": SECTION_TITLES,
        "glossary": GLOSSARY_TERMS,
    }
)

CATEGORY_DESCRIPTIONS = (
    ("contents", "Search in documentation contents"),
    ("index", "Search in documentation index"),
    ("glossary", "Search in documentation glossary"),
    ("all", "Search in all categories (default: index)"),
)
