"""
Curated competitor lists per industry.

Similarity values are hand-assigned display hints, sorted descending
within each list by convention.
"""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from ..models.competitor import CompetitorRecord, RegionalList, RegionalOverride

C = CompetitorRecord


# Industries whose competitors depend on where the site operates.
# HVAC was the first vertical and carries its own national and Charleston-area lists.
REGIONAL_OVERRIDES: Mapping[str, RegionalOverride] = MappingProxyType({
    "HVAC & Home Services": RegionalOverride(
        national=(
            C("onehourheatandair.com", "One Hour Heating & Air Conditioning", "National HVAC franchise", 0.85),
            C("aaborig.com", "A&A Originals HVAC", "HVAC services", 0.82),
            C("mrrooter.com", "Mr. Rooter Plumbing", "Plumbing & HVAC services", 0.75),
        ),
        regions=(
            RegionalList(
                hints=("carolina", "coastal", "charleston"),
                competitors=(
                    C("charlestonhvac.com", "Charleston HVAC Services", "Local Charleston HVAC company", 0.92),
                    C("carolinacomfort.com", "Carolina Comfort Systems", "SC HVAC contractor", 0.88),
                    C("lowcountryhvac.com", "Lowcountry HVAC", "Lowcountry heating and cooling", 0.85),
                ),
                national_tail=1,
            ),
        ),
    ),
})


INDUSTRY_COMPETITORS: Mapping[str, Tuple[CompetitorRecord, ...]] = MappingProxyType({
    # Landscaping & outdoor services
    "Landscaping & Lawn Care": (
        C("trugreen.com", "TruGreen", "National lawn care & landscaping", 0.90),
        C("brightview.com", "BrightView", "Commercial landscaping services", 0.88),
        C("bartlett.com", "Bartlett Tree Experts", "Tree and shrub care", 0.85),
        C("ruppertcompanies.com", "Ruppert Landscape", "Landscape construction & management", 0.82),
    ),
    "Tree Service": (
        C("davey.com", "Davey Tree Expert Company", "Tree service & environmental solutions", 0.92),
        C("bartlett.com", "Bartlett Tree Experts", "Tree care specialists", 0.90),
        C("savaree.com", "SavATree", "Tree, shrub and lawn care", 0.85),
        C("treesaregood.org", "Trees Are Good (ISA)", "Certified arborist network", 0.75),
    ),
    "Pest Control": (
        C("orkin.com", "Orkin", "Pest control services", 0.92),
        C("terminix.com", "Terminix", "Termite & pest control", 0.90),
        C("aptive.com", "Aptive Environmental", "Pest control solutions", 0.85),
        C("rentokil.com", "Rentokil", "Pest control & hygiene", 0.82),
    ),
    "Pool & Spa": (
        C("asppoolco.com", "ASP - America's Swimming Pool", "Pool cleaning & repair", 0.90),
        C("poolcorp.com", "Pool Corporation", "Pool supplies & equipment", 0.85),
        C("lesliespool.com", "Leslie's Pool Supplies", "Pool supply retailer", 0.82),
        C("riverbendpools.com", "Riverbend Pools", "Custom pool builder", 0.78),
    ),
    "Pressure Washing": (
        C("windowgenie.com", "Window Genie", "Pressure washing & window cleaning", 0.88),
        C("meninfp.com", "Men In Kilts", "Exterior house cleaning", 0.85),
        C("shinewindowcare.com", "Shine Window Care", "Pressure washing services", 0.82),
    ),
    "Fencing": (
        C("superiorfence.com", "Superior Fence & Rail", "Fence installation", 0.90),
        C("fencesupply.com", "Fence Supply Online", "Fence products & installation", 0.82),
        C("lonefencecompany.com", "Long Fence", "Fence & deck construction", 0.80),
    ),

    # Home services
    "Plumbing": (
        C("mrrooter.com", "Mr. Rooter Plumbing", "Plumbing services", 0.92),
        C("rotorooter.com", "Roto-Rooter", "Plumbing & drain services", 0.90),
        C("benjaminfranklinplumbing.com", "Benjamin Franklin Plumbing", "Punctual plumbers", 0.85),
    ),
    "Electrical": (
        C("mrelectric.com", "Mr. Electric", "Electrical services", 0.90),
        C("mistersparky.com", "Mister Sparky", "On time electricians", 0.88),
    ),
    "Roofing": (
        C("gaf.com", "GAF", "Roofing manufacturer & contractor network", 0.88),
        C("owenscorning.com", "Owens Corning", "Roofing & insulation", 0.85),
        C("certainteed.com", "CertainTeed", "Building products & roofing", 0.82),
    ),
    "Painting": (
        C("certapro.com", "CertaPro Painters", "Professional painting services", 0.92),
        C("freshcoatpainters.com", "Fresh Coat Painters", "House painting franchise", 0.88),
        C("fivestarpainting.com", "Five Star Painting", "Residential & commercial painting", 0.85),
    ),
    "Cleaning Services": (
        C("merrymaids.com", "Merry Maids", "House cleaning services", 0.92),
        C("mollymaid.com", "Molly Maid", "Residential cleaning", 0.90),
        C("maids.com", "The Maids", "Home cleaning services", 0.88),
        C("servicemaster.com", "ServiceMaster Clean", "Commercial cleaning", 0.82),
    ),
    "Moving & Storage": (
        C("twomenandatruck.com", "Two Men and a Truck", "Moving services", 0.92),
        C("pods.com", "PODS", "Moving & storage containers", 0.85),
        C("upack.com", "U-Pack", "Moving & storage solutions", 0.82),
    ),
    "Garage Door": (
        C("precisiondoor.net", "Precision Door Service", "Garage door repair", 0.90),
        C("aaaohd.com", "AAA Overhead Door", "Garage door services", 0.85),
    ),
    "Appliance Repair": (
        C("mrappliance.com", "Mr. Appliance", "Appliance repair services", 0.90),
        C("searshomeservices.com", "Sears Home Services", "Appliance repair", 0.88),
    ),

    # Construction & renovation
    "Remodeling": (
        C("houzz.com", "Houzz", "Home remodeling platform", 0.85),
        C("homeadvisor.com", "HomeAdvisor", "Home improvement marketplace", 0.82),
        C("bathfitter.com", "Bath Fitter", "Bathroom remodeling", 0.78),
    ),
    "General Contracting": (
        C("angi.com", "Angi", "Home services marketplace", 0.82),
        C("builderonline.com", "Professional Builder", "Home building resources", 0.75),
    ),
    "Decks & Patios": (
        C("trex.com", "Trex", "Composite decking", 0.85),
        C("timbertech.com", "TimberTech", "Deck building materials", 0.82),
    ),

    # Professional services
    "Legal Services": (
        C("morganandmorgan.com", "Morgan & Morgan", "Personal injury law firm", 0.85),
        C("findlaw.com", "FindLaw", "Legal information & attorney directory", 0.75),
        C("avvo.com", "Avvo", "Lawyer ratings & reviews", 0.72),
    ),
    "Healthcare": (
        C("zocdoc.com", "Zocdoc", "Healthcare booking platform", 0.80),
        C("healthgrades.com", "Healthgrades", "Doctor reviews & ratings", 0.78),
        C("webmd.com", "WebMD", "Health information", 0.70),
    ),
    "Real Estate": (
        C("zillow.com", "Zillow", "Real estate marketplace", 0.90),
        C("realtor.com", "Realtor.com", "Real estate listings", 0.88),
        C("redfin.com", "Redfin", "Real estate brokerage", 0.85),
    ),
    "Veterinary": (
        C("banfield.com", "Banfield Pet Hospital", "Veterinary care", 0.90),
        C("vcahospitals.com", "VCA Animal Hospitals", "Veterinary hospitals", 0.88),
        C("vetstreet.com", "Vetstreet", "Pet health information", 0.75),
    ),
    "Finance & Insurance": (
        C("nerdwallet.com", "NerdWallet", "Financial guidance", 0.80),
        C("bankrate.com", "Bankrate", "Financial rates & advice", 0.78),
    ),

    # Tech & marketing
    "Technology & SaaS": (
        C("g2.com", "G2", "Software reviews", 0.75),
        C("capterra.com", "Capterra", "Software comparison", 0.72),
    ),
    "Marketing & SEO": (
        C("semrush.com", "SEMrush", "SEO & marketing platform", 0.88),
        C("ahrefs.com", "Ahrefs", "SEO tools", 0.85),
        C("moz.com", "Moz", "SEO software", 0.82),
    ),

    # Food & hospitality
    "Restaurant & Food": (
        C("yelp.com", "Yelp", "Restaurant reviews", 0.80),
        C("doordash.com", "DoorDash", "Food delivery", 0.75),
        C("grubhub.com", "Grubhub", "Online food ordering", 0.72),
    ),

    "Automotive": (
        C("midas.com", "Midas", "Auto repair services", 0.88),
        C("jiffy-lube.com", "Jiffy Lube", "Oil change & maintenance", 0.85),
        C("firestonecompleteautocare.com", "Firestone", "Auto repair & tires", 0.82),
    ),

    "Fitness & Wellness": (
        C("orangetheory.com", "Orangetheory Fitness", "Fitness studio franchise", 0.88),
        C("planetfitness.com", "Planet Fitness", "Gym chain", 0.85),
        C("anytimefitness.com", "Anytime Fitness", "24-hour gym", 0.82),
    ),
})


# Low-confidence suggestions for industries without a curated list
GENERIC_FALLBACK: Tuple[CompetitorRecord, ...] = (
    C("yelp.com", "Yelp", "Business reviews & ratings", 0.60),
    C("google.com/business", "Google Business", "Local business listings", 0.55),
)


def get_curated_competitors(industry: str) -> Optional[Tuple[CompetitorRecord, ...]]:
    """Curated competitors for an industry, or None if it has no list."""
    return INDUSTRY_COMPETITORS.get(industry)
