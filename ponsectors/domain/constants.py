"""Fixed catalogues offered by the registration and submission forms."""

THEMATIC_AREAS = [
    "Agriculture and Food Security",
    "Biodiversity Conservation",
    "Climate Change and Environmental Sustainability",
    "Economic Growth and Inequality",
    "Education",
    "Gender Equality",
    "Governance and Anti-corruption",
    "Health and Well-being",
    "Housing Solutions",
    "Human Rights and Social Justice",
    "Infrastructure Development",
    "Technology and Innovation",
    "Unemployment",
    "Water, Sanitation, and Hygiene (WASH)",
    "Other",
]

COUNTRIES = [
    "Ethiopia", "Kenya", "Nigeria", "South Africa", "Egypt",
    "Ghana", "Rwanda", "Uganda", "Tanzania", "United States",
    "United Kingdom", "Canada", "Germany", "India", "Other",
]

INDIVIDUAL_SUBTYPES = ["Student", "Professional", "Researcher", "Activist", "Other"]
ORGANIZATION_SUBTYPES = ["NGO", "Private Company", "Government Agency", "Educational Inst.", "Other"]
GROUP_SUBTYPES = ["Community Group", "Coalition", "Network", "Association", "Other"]

SUBTYPES_BY_STAKEHOLDER = {
    "Individual": INDIVIDUAL_SUBTYPES,
    "Organization": ORGANIZATION_SUBTYPES,
    "Group": GROUP_SUBTYPES,
}
