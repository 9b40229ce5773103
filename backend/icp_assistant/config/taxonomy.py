# /icp_assistant/config/taxonomy.py

# Controlled vocabularies used by the text classifier for industries,
# locations and decision-maker roles. The quick-match tables short-circuit
# the remote AI call; the fallback tables are used when that call fails.

# --- Industries ---
# Exact (lowercased) inputs that map straight to a standard industry name.
INDUSTRY_QUICK_MATCHES = {
    "retail": "Retail",
    "saas": "Computer Software",
    "software": "Computer Software",
    "healthcare": "Hospital & Health Care",
    "manufacturing": "Manufacturing",
    "fintech": "Financial Services",
    "finance": "Financial Services",
    "ecommerce": "Internet",
    "e-commerce": "Internet",
    "logistics": "Logistics & Supply Chain",
    "telecom": "Telecommunications",
    "insurance": "Insurance",
    "banking": "Banking",
    "pharma": "Pharmaceuticals",
    "automotive": "Automotive",
    "hotel": "Hospitality",
    "restaurant": "Restaurants",
    "real estate": "Real Estate",
    "technology": "Information Technology & Services",
    "education": "Education Management",
}

# Substring keywords that are unambiguous even inside a longer phrase.
INDUSTRY_CRITICAL_KEYWORDS = [
    ("e-commerce", "Internet"),
    ("ecommerce", "Internet"),
    ("online store", "Internet"),
    ("retail", "Retail"),
]

# Ordered (pattern, industry, confidence, alternatives) rows for the local fallback.
INDUSTRY_FALLBACK_PATTERNS = [
    (r"\b(software|saas|app|apps|tech|it|ai|cloud)\b", "Computer Software", "medium",
     ["Information Technology & Services", "Internet"]),
    (r"\b(bank|banking|finance|financial|fintech|payments?)\b", "Financial Services", "medium",
     ["Banking", "Insurance"]),
    (r"\b(health|healthcare|medical|hospital|clinic|doctor)\b", "Hospital & Health Care", "medium",
     ["Medical Practice", "Pharmaceuticals"]),
    (r"\b(shop|store|retail|ecommerce|e-commerce)\b", "Retail", "medium",
     ["Internet", "Consumer Goods"]),
    (r"\b(school|education|edtech|university|college|training)\b", "Education Management", "medium",
     ["E-Learning", "Higher Education"]),
    (r"\b(factory|manufacturing|industrial|production)\b", "Manufacturing", "medium",
     ["Industrial Automation", "Machinery"]),
    (r"\b(restaurant|food|cafe|catering)\b", "Food & Beverages", "medium",
     ["Restaurants", "Hospitality"]),
    (r"\b(fitness|gym|wellness|yoga)\b", "Health, Wellness & Fitness", "medium",
     ["Sports", "Hospitality"]),
    (r"\b(real estate|property|properties|realty)\b", "Real Estate", "medium",
     ["Construction", "Commercial Real Estate"]),
    (r"\b(marketing|advertising|agency|media)\b", "Marketing & Advertising", "medium",
     ["Online Media", "Public Relations"]),
    (r"\b(logistics|shipping|transport|freight|supply chain)\b", "Logistics & Supply Chain", "medium",
     ["Transportation", "Warehousing"]),
]

INDUSTRY_LAST_RESORT = "Professional Services"

INDUSTRY_SUGGESTIONS = [
    "Accounting", "Automotive", "Banking", "Biotechnology", "Computer Software",
    "Construction", "Consumer Goods", "E-Learning", "Education Management",
    "Financial Services", "Food & Beverages", "Health, Wellness & Fitness",
    "Hospital & Health Care", "Hospitality", "Human Resources",
    "Information Technology & Services", "Insurance", "Internet", "Legal Services",
    "Logistics & Supply Chain", "Management Consulting", "Manufacturing",
    "Marketing & Advertising", "Media Production", "Pharmaceuticals",
    "Professional Services", "Real Estate", "Restaurants", "Retail",
    "Telecommunications", "Transportation",
]

# --- Locations ---
LOCATION_CORRECTIONS = {
    "usa": "United States",
    "us": "United States",
    "u.s.": "United States",
    "america": "United States",
    "uk": "United Kingdom",
    "england": "United Kingdom",
    "uae": "United Arab Emirates",
    "dubay": "Dubai",
    "bangalor": "Bangalore",
    "bengaluru": "Bangalore",
    "singapur": "Singapore",
    "londan": "London",
    "berln": "Berlin",
    "tokio": "Tokyo",
    "mumbi": "Mumbai",
    "bombay": "Mumbai",
    "sydny": "Sydney",
}

KNOWN_LOCATIONS = [
    "United States", "United Kingdom", "India", "Canada", "Australia", "Germany",
    "France", "Singapore", "United Arab Emirates", "Dubai", "Bangalore", "Mumbai",
    "Delhi", "London", "New York", "San Francisco", "Berlin", "Tokyo", "Sydney",
    "Toronto", "Remote", "Europe", "Asia", "North America", "Middle East",
]

# Minimum rapidfuzz score for a spelling correction to be accepted.
LOCATION_FUZZY_THRESHOLD = 85

LOCATION_SUGGESTIONS = [
    "United States", "United Kingdom", "India", "Canada", "Australia", "Germany",
    "France", "Singapore", "United Arab Emirates", "Dubai", "Bangalore", "Mumbai",
    "London", "New York", "San Francisco", "Berlin", "Tokyo", "Remote",
]

# --- Decision-maker roles ---
ROLE_MAP = {
    "ceo": "CEO",
    "chief executive officer": "CEO",
    "cto": "CTO",
    "chief technology officer": "CTO",
    "cmo": "CMO",
    "chief marketing officer": "CMO",
    "cfo": "CFO",
    "chief financial officer": "CFO",
    "coo": "COO",
    "chief operating officer": "COO",
    "founder": "Founder",
    "co-founder": "Co-Founder",
    "cofounder": "Co-Founder",
    "owner": "Owner",
    "vp sales": "VP of Sales",
    "vp of sales": "VP of Sales",
    "vp marketing": "VP of Marketing",
    "vp of marketing": "VP of Marketing",
    "head of sales": "Head of Sales",
    "sales head": "Head of Sales",
    "head of marketing": "Head of Marketing",
    "marketing head": "Head of Marketing",
    "sales director": "Sales Director",
    "marketing director": "Marketing Director",
    "sales manager": "Sales Manager",
    "marketing manager": "Marketing Manager",
}

# Ordered (keywords, category) rows; the first row with any keyword present wins.
ROLE_CATEGORIES = [
    (["ceo", "cto", "cmo", "cfo", "coo", "chief"], "C-Level"),
    (["vp", "vice president"], "VP-Level"),
    (["director"], "Director"),
    (["head"], "Head"),
    (["manager"], "Manager"),
    (["founder"], "Founder"),
    (["owner"], "Owner"),
]

ROLE_SUGGESTIONS = [
    "CEO", "CTO", "CMO", "CFO", "COO", "Founder", "Co-Founder", "Owner",
    "VP of Sales", "VP of Marketing", "VP of Engineering", "Head of Sales",
    "Head of Marketing", "Head of Growth", "Head of Operations", "Sales Director",
    "Marketing Director", "IT Director", "Sales Manager", "Marketing Manager",
    "Product Manager", "HR Manager",
]

MAX_SUGGESTIONS = 10
