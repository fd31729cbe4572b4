"""Four-tone color catalogs for skin, hair, shirts, pants and shoes.

Unknown ids resolve to index 1 of each catalog.
"""

from pixel_avatar.palettes.catalog import Catalog, ToneSet, make_catalog


TONE_DEFAULT_INDEX = 1


SKIN_TONES: Catalog[ToneSet] = make_catalog(
    "skin_tones",
    [
        ToneSet("porcelain", "#FFF5EE", "#F0E0D8", "#FFFFFF", "#FFF0E8"),
        ToneSet("ivory", "#FFEEE0", "#E8D4C4", "#FFF8F2", "#FFEAD8"),
        ToneSet("light", "#FFDFC4", "#E8C4A8", "#FFF0E0", "#F5D4B4"),
        ToneSet("fair", "#F0C8A0", "#D4A878", "#FFDDC0", "#E8BC90"),
        ToneSet("beige", "#E8C09C", "#C8A078", "#F8D8B8", "#D8B08C"),
        ToneSet("warm_beige", "#DEB887", "#C49A6C", "#F0CCA0", "#D0A878"),
        ToneSet("medium", "#D4A574", "#B8865C", "#E8BC90", "#C49668"),
        ToneSet("olive", "#C4A070", "#A08050", "#D8B888", "#B89060"),
        ToneSet("tan", "#C68642", "#A66A2C", "#D8A060", "#B87838"),
        ToneSet("caramel", "#A67B5B", "#886040", "#C09070", "#98704C"),
        ToneSet("brown", "#8D5524", "#6D3D14", "#A86C38", "#7D4820"),
        ToneSet("chestnut", "#7B4B32", "#5C3520", "#986044", "#6C4028"),
        ToneSet("dark", "#5C3A21", "#3C2211", "#7A5030", "#4D2E18"),
        ToneSet("espresso", "#4A3020", "#301810", "#604030", "#3C2418"),
        ToneSet("deep", "#3D2816", "#28180C", "#503820", "#322010"),
        # Fantasy tones
        ToneSet("blue", "#7CB9E8", "#5090C0", "#A0D0F0", "#68A8D8"),
        ToneSet("green", "#90C090", "#60A060", "#B0E0B0", "#78B078"),
        ToneSet("purple", "#B090D0", "#8060A0", "#D0B0F0", "#9878B8"),
        ToneSet("pink", "#FFB0C0", "#E08090", "#FFD0E0", "#F098A8"),
        ToneSet("gray", "#A0A0A0", "#707070", "#C8C8C8", "#888888"),
    ],
    default_index=TONE_DEFAULT_INDEX,
)

HAIR_COLORS: Catalog[ToneSet] = make_catalog(
    "hair_colors",
    [
        ToneSet("black", "#1a1a1a", "#0a0a0a", "#3a3a3a", "#282828"),
        ToneSet("brown", "#4a3728", "#2d2118", "#6d5545", "#3d2d20"),
        ToneSet("auburn", "#8B4513", "#5c2d0c", "#B06030", "#724010"),
        ToneSet("ginger", "#D2691E", "#994c12", "#E88040", "#B85818"),
        ToneSet("blonde", "#DAA520", "#a07810", "#F0C040", "#C49018"),
        ToneSet("platinum", "#E8E8E8", "#c0c0c0", "#FFFFFF", "#d8d8d8"),
        ToneSet("red", "#B22222", "#801818", "#D44444", "#991c1c"),
        ToneSet("pink", "#FF69B4", "#d44090", "#FF8DC7", "#f050a0"),
        ToneSet("blue", "#4169E1", "#2848a8", "#6189FF", "#3858c8"),
        ToneSet("purple", "#8B5CF6", "#6840c0", "#A87CFF", "#7a50e0"),
        ToneSet("green", "#228B22", "#166016", "#44AD44", "#1c781c"),
        ToneSet("teal", "#20B2AA", "#148884", "#40D2CA", "#189898"),
    ],
    default_index=TONE_DEFAULT_INDEX,
)

SHIRT_COLORS: Catalog[ToneSet] = make_catalog(
    "shirt_colors",
    [
        ToneSet("white", "#F5F5F5", "#C8C8C8", "#FFFFFF", "#E0E0E0"),
        ToneSet("black", "#2D2D2D", "#151515", "#454545", "#222222"),
        ToneSet("red", "#DC2626", "#9c1818", "#F04040", "#c42020"),
        ToneSet("blue", "#2563EB", "#1845a8", "#4080FF", "#2055d0"),
        ToneSet("green", "#16A34A", "#0e7030", "#28C860", "#129040"),
        ToneSet("yellow", "#EAB308", "#b08800", "#FFD030", "#d0a008"),
        ToneSet("purple", "#9333EA", "#6820b0", "#B050FF", "#8028d0"),
        ToneSet("pink", "#EC4899", "#c03078", "#FF60B0", "#d83888"),
        ToneSet("orange", "#EA580C", "#b04008", "#FF7028", "#d04c0a"),
        ToneSet("teal", "#0D9488", "#087068", "#20B8A8", "#0a8078"),
    ],
    default_index=TONE_DEFAULT_INDEX,
)

PANTS_COLORS: Catalog[ToneSet] = make_catalog(
    "pants_colors",
    [
        ToneSet("blue", "#1E40AF", "#142c78", "#2858D0", "#183898"),
        ToneSet("black", "#1F1F1F", "#0a0a0a", "#383838", "#151515"),
        ToneSet("brown", "#78350F", "#4c2208", "#985018", "#602c0c"),
        ToneSet("gray", "#4B5563", "#303840", "#687080", "#404850"),
        ToneSet("green", "#166534", "#0d4020", "#208548", "#125028"),
        ToneSet("khaki", "#A8A29E", "#807870", "#C0B8B0", "#989088"),
    ],
    default_index=TONE_DEFAULT_INDEX,
)

SHOE_COLORS: Catalog[ToneSet] = make_catalog(
    "shoe_colors",
    [
        ToneSet("brown", "#78350F", "#4c2208", "#985018", "#602c0c"),
        ToneSet("black", "#1F1F1F", "#0a0a0a", "#383838", "#151515"),
        ToneSet("white", "#E5E5E5", "#b8b8b8", "#FFFFFF", "#d0d0d0"),
        ToneSet("red", "#DC2626", "#9c1818", "#F04040", "#c42020"),
        ToneSet("blue", "#2563EB", "#1845a8", "#4080FF", "#2055d0"),
    ],
    default_index=TONE_DEFAULT_INDEX,
)
