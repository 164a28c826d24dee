"""
Weighted industry keyword table.

Order matters: the classifier keeps the earlier entry on a tie, so more
specific categories are declared before general ones. Home-service
verticals carry weights 8-10, professional services 6, generic retail
and tech 4.
"""

from typing import Optional, Tuple

from ..models.industry import IndustryDefinition

INDUSTRIES: Tuple[IndustryDefinition, ...] = (
    # Landscaping & outdoor services
    IndustryDefinition("Landscaping & Lawn Care", (
        "landscap", "lawn care", "lawn service", "mowing", "turf", "sod",
        "irrigation", "sprinkler", "hardscape", "garden design",
        "landscape design", "yard", "grass cutting", "mulch", "outdoor living",
    ), 10),
    IndustryDefinition("Tree Service", (
        "tree service", "tree removal", "tree trimming", "tree care", "arborist",
        "stump removal", "stump grinding", "tree cutting",
    ), 10),
    IndustryDefinition("Pest Control", (
        "pest control", "exterminator", "termite", "bed bug", "rodent",
        "mosquito", "wildlife removal", "pest management",
    ), 10),
    IndustryDefinition("Pool & Spa", (
        "pool service", "pool cleaning", "pool repair", "hot tub", "spa service",
        "pool maintenance", "pool builder", "swimming pool",
    ), 10),
    IndustryDefinition("Pressure Washing", (
        "pressure wash", "power wash", "soft wash", "exterior cleaning",
        "driveway cleaning", "house washing",
    ), 10),
    IndustryDefinition("Fencing", (
        "fencing", "fence company", "fence installation", "fence repair",
        "wood fence", "vinyl fence", "chain link",
    ), 10),

    # Home services
    IndustryDefinition("HVAC & Home Services", (
        "hvac", "heating", "cooling", "air conditioning", "furnace", "heat pump",
        "ductwork", "ac repair", "ac installation", "air quality",
    ), 8),
    IndustryDefinition("Plumbing", (
        "plumbing", "plumber", "drain", "water heater", "pipe", "sewer",
        "leak repair", "faucet", "toilet repair",
    ), 8),
    IndustryDefinition("Electrical", (
        "electrician", "electrical", "wiring", "panel", "outlet",
        "lighting installation", "electrical repair",
    ), 8),
    IndustryDefinition("Roofing", (
        "roofing", "roof repair", "roof replacement", "shingle", "gutter",
        "roof installation", "roof inspection",
    ), 8),
    IndustryDefinition("Painting", (
        "painting", "painter", "interior painting", "exterior painting",
        "house painting", "commercial painting", "staining",
    ), 8),
    IndustryDefinition("Cleaning Services", (
        "cleaning service", "house cleaning", "maid service", "janitorial",
        "commercial cleaning", "deep clean", "move out cleaning", "office cleaning",
    ), 8),
    IndustryDefinition("Moving & Storage", (
        "moving company", "movers", "relocation", "storage", "packing",
        "moving service", "local moving", "long distance moving",
    ), 8),
    IndustryDefinition("Flooring", (
        "flooring", "hardwood floor", "carpet", "tile installation",
        "floor refinishing", "laminate", "vinyl flooring",
    ), 8),
    IndustryDefinition("Windows & Doors", (
        "window replacement", "door installation", "window repair",
        "glass repair", "storm door", "patio door",
    ), 8),
    IndustryDefinition("Garage Door", (
        "garage door", "overhead door", "garage door repair",
        "garage door installation", "garage door opener",
    ), 8),
    IndustryDefinition("Home Security", (
        "home security", "alarm system", "security camera", "surveillance",
        "smart home", "home automation",
    ), 8),
    IndustryDefinition("Appliance Repair", (
        "appliance repair", "washer repair", "dryer repair",
        "refrigerator repair", "dishwasher repair", "oven repair",
    ), 8),

    # Construction & renovation
    IndustryDefinition("General Contracting", (
        "general contractor", "home builder", "custom home", "new construction",
        "building contractor",
    ), 7),
    IndustryDefinition("Remodeling", (
        "remodel", "renovation", "kitchen remodel", "bathroom remodel",
        "home renovation", "home improvement", "basement finishing",
    ), 7),
    IndustryDefinition("Concrete & Masonry", (
        "concrete", "masonry", "brick", "stone work", "paver", "foundation",
        "retaining wall", "stamped concrete",
    ), 7),
    IndustryDefinition("Decks & Patios", (
        "deck builder", "patio", "pergola", "outdoor kitchen", "deck installation",
        "deck repair", "composite deck",
    ), 7),

    # Professional services
    IndustryDefinition("Legal Services", (
        "law firm", "attorney", "lawyer", "legal services", "personal injury",
        "family law", "criminal defense", "estate planning", "litigation",
    ), 6),
    IndustryDefinition("Healthcare", (
        "doctor", "medical", "health clinic", "dental", "dentist", "hospital",
        "therapy", "chiropractic", "urgent care", "physician",
    ), 6),
    IndustryDefinition("Real Estate", (
        "real estate", "realtor", "property", "homes for sale", "mortgage",
        "realty", "home buyer", "listing agent", "real estate agent",
    ), 6),
    IndustryDefinition("Finance & Insurance", (
        "insurance", "financial advisor", "investment", "loan", "credit union",
        "accounting", "tax", "cpa", "bookkeeping", "wealth management",
    ), 6),
    IndustryDefinition("Veterinary", (
        "veterinar", "animal hospital", "pet clinic", "dog", "cat", "pet care",
        "animal care", "vet",
    ), 6),

    # Food & hospitality
    IndustryDefinition("Restaurant & Food", (
        "restaurant", "food", "dining", "menu", "catering", "pizza", "cafe",
        "bistro", "bar", "grill", "takeout", "delivery",
    ), 5),
    IndustryDefinition("Hotel & Lodging", (
        "hotel", "motel", "inn", "resort", "vacation rental", "bed and breakfast",
        "lodging", "accommodation",
    ), 5),

    # Other
    IndustryDefinition("Automotive", (
        "auto", "car repair", "mechanic", "auto body", "oil change", "tire",
        "car dealership", "auto detailing", "car wash",
    ), 5),
    IndustryDefinition("Retail & E-commerce", (
        "shop", "store", "buy online", "shopping cart", "product", "ecommerce",
        "retail", "boutique",
    ), 4),
    IndustryDefinition("Technology & SaaS", (
        "software", "saas", "platform", "app", "technology", "cloud", "api",
        "automation", "startup",
    ), 4),
    IndustryDefinition("Marketing & SEO", (
        "marketing agency", "seo", "advertising", "digital marketing", "branding",
        "social media marketing", "web design", "ppc",
    ), 4),
    IndustryDefinition("Education", (
        "school", "education", "learning", "training", "course", "university",
        "tutoring", "academy",
    ), 4),
    IndustryDefinition("Fitness & Wellness", (
        "gym", "fitness", "personal training", "yoga", "pilates", "crossfit",
        "wellness", "spa", "massage",
    ), 4),
    IndustryDefinition("Photography", (
        "photographer", "photography", "wedding photo", "portrait", "headshot",
        "event photography",
    ), 4),
    IndustryDefinition("Event Services", (
        "event planning", "wedding planner", "dj", "party rental", "event venue",
        "banquet", "reception",
    ), 4),
)


def industry_names() -> Tuple[str, ...]:
    """Industry names in declaration order."""
    return tuple(industry.name for industry in INDUSTRIES)


def get_industry(name: str) -> Optional[IndustryDefinition]:
    """Look up an industry definition by display name."""
    for industry in INDUSTRIES:
        if industry.name == name:
            return industry
    return None
