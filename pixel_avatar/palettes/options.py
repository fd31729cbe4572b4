"""Style, accessory and pose catalogs with their unlock thresholds.

Style catalogs fall back to index 1 like the tone catalogs. ``ACCESSORIES``
and ``POSES`` fall back to index 0 (``none`` and ``idle``) so a stale id never
puts an unrequested item on the avatar.
"""

from pixel_avatar.palettes.catalog import Catalog, OptionEntry, make_catalog


STYLE_DEFAULT_INDEX = 1


HAIR_STYLES: Catalog[OptionEntry] = make_catalog(
    "hair_styles",
    [
        OptionEntry("short", "Short", unlocked=True),
        OptionEntry("medium", "Medium", unlocked=True),
        OptionEntry("long", "Long", unlocked=True),
        OptionEntry("curly", "Curly", unlocked=True),
        OptionEntry("afro", "Afro", unlocked=True),
        OptionEntry("dreads", "Dreads", unlocked=True),
        OptionEntry("ponytail", "Ponytail", unlocked=True),
        OptionEntry("bun", "Bun", unlocked=True),
        OptionEntry("spiky", "Spiky", points_required=50),
        OptionEntry("mohawk", "Mohawk", points_required=100),
        OptionEntry("pigtails", "Pigtails", points_required=75),
        OptionEntry("bald", "Bald", unlocked=True),
    ],
    default_index=STYLE_DEFAULT_INDEX,
)

SHIRT_STYLES: Catalog[OptionEntry] = make_catalog(
    "shirt_styles",
    [
        OptionEntry("tshirt", "T-Shirt", unlocked=True),
        OptionEntry("polo", "Polo", unlocked=True),
        OptionEntry("hoodie", "Hoodie", points_required=30),
        OptionEntry("sweater", "Sweater", points_required=40),
        OptionEntry("tank", "Tank Top", unlocked=True),
        OptionEntry("flannel", "Flannel", points_required=60),
    ],
    default_index=STYLE_DEFAULT_INDEX,
)

PANTS_STYLES: Catalog[OptionEntry] = make_catalog(
    "pants_styles",
    [
        OptionEntry("jeans", "Jeans", unlocked=True),
        OptionEntry("shorts", "Shorts", unlocked=True),
        OptionEntry("skirt", "Skirt", unlocked=True),
        OptionEntry("dress", "Dress", points_required=50),
    ],
    default_index=STYLE_DEFAULT_INDEX,
)

ACCESSORIES: Catalog[OptionEntry] = make_catalog(
    "accessories",
    [
        OptionEntry("none", "None", unlocked=True),
        OptionEntry("glasses", "Glasses", unlocked=True),
        OptionEntry("wings", "Wings", unlocked=True),
        OptionEntry("staff", "Staff", unlocked=True),
        OptionEntry("unicorn_horn", "Unicorn Horn", unlocked=True),
        OptionEntry("sunglasses", "Sunglasses", points_required=25),
        OptionEntry("hat_cap", "Cap", points_required=30),
        OptionEntry("hat_beanie", "Beanie", points_required=35),
        OptionEntry("hat_cowboy", "Cowboy Hat", points_required=100),
        OptionEntry("earrings", "Earrings", points_required=20),
        OptionEntry("necklace", "Necklace", points_required=40),
        OptionEntry("scarf", "Scarf", points_required=45),
        OptionEntry("pride_flag", "Pride Flag", points_required=50),
        OptionEntry("halo", "Halo", points_required=150),
        OptionEntry("crown", "Crown", points_required=500),
    ],
    default_index=0,
)

# Only the first six poses have their own arm geometry; the rest draw idle.
POSES: Catalog[OptionEntry] = make_catalog(
    "poses",
    [
        OptionEntry("idle", "Idle", unlocked=True),
        OptionEntry("waving", "Waving", unlocked=True),
        OptionEntry("raising_roof", "Raising the Roof", unlocked=True),
        OptionEntry("robot", "Robot Arms", unlocked=True),
        OptionEntry("tpose", "T-Pose", unlocked=True),
        OptionEntry("karate", "Karate", unlocked=True),
        OptionEntry("dab", "Dab", points_required=30),
        OptionEntry("flexing", "Flexing", points_required=50),
        OptionEntry("peace", "Peace Signs", points_required=40),
        OptionEntry("hands_up", "Hands Up", points_required=25),
        OptionEntry("thinking", "Thinking", points_required=35),
        OptionEntry("crossed_arms", "Crossed Arms", points_required=45),
    ],
    default_index=0,
)
