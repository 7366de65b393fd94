"""Fixed vocabularies shared by the extractor, matcher, scorers and synthesizer.

Keeping every word list here means a term is classified the same way
wherever it shows up, so warnings never disagree with the evidence they cite.
"""

import re

# ---------------------------------------------------------------------------
# Stop-words discarded when tokenising bullet lines
# ---------------------------------------------------------------------------
STOP_WORDS: frozenset[str] = frozenset({
    # Function words
    "the", "and", "for", "are", "but", "not", "you", "all", "any", "can",
    "had", "her", "was", "one", "our", "out", "has", "have", "been", "being",
    "were", "will", "with", "this", "that", "these", "those", "from", "they",
    "what", "about", "which", "when", "where", "who", "whom", "into", "through",
    "during", "before", "after", "above", "below", "between", "among", "would",
    "could", "should", "must", "may", "might", "also", "more", "most", "other",
    "than", "then", "their", "there", "them", "your", "such", "each", "both",
    "very", "just", "well", "its", "per", "via", "etc", "e.g", "i.e", "including",
    "across", "within", "using", "use", "used", "able", "like", "make", "new",
    # Job-posting filler
    "experience", "experienced", "years", "year", "strong", "knowledge",
    "familiarity", "familiar", "ability", "abilities", "skills", "skill",
    "understanding", "proficiency", "proficient", "plus", "preferred",
    "required", "requirements", "qualifications", "minimum", "least",
    "work", "working", "worked", "role", "team", "teams", "candidate",
    "job", "position", "company", "related", "relevant", "field", "degree",
    "good", "great", "excellent", "solid", "proven", "demonstrated",
    "hands", "level", "based", "environment", "environments", "ideal",
})

# ---------------------------------------------------------------------------
# Fixed-vocabulary regex passes: canonical term -> pattern body
# ---------------------------------------------------------------------------
TECHNICAL_TERMS: dict[str, str] = {
    "javascript": r"javascript",
    "typescript": r"typescript",
    "python": r"python",
    "java": r"java",
    "c++": r"c\+\+",
    "c#": r"c#",
    "golang": r"golang",
    "ruby": r"ruby",
    "php": r"php",
    "swift": r"swift",
    "kotlin": r"kotlin",
    "scala": r"scala",
    "rust": r"rust",
    "sql": r"sql",
    "html": r"html5?",
    "css": r"css3?",
    "react": r"react(?:\.?js)?",
    "angular": r"angular(?:\.?js)?",
    "vue": r"vue(?:\.?js)?",
    "node.js": r"node\.?js",
    "next.js": r"next\.?js",
    "django": r"django",
    "flask": r"flask",
    "fastapi": r"fastapi",
    "spring": r"spring(?:\s+boot)?",
    "rails": r"(?:ruby\s+on\s+)?rails",
    ".net": r"\.net|asp\.net",
    "graphql": r"graphql",
    "rest api": r"rest(?:ful)?\s+apis?",
    "postgresql": r"postgres(?:ql)?",
    "mysql": r"mysql",
    "mongodb": r"mongo(?:db)?",
    "redis": r"redis",
    "elasticsearch": r"elasticsearch",
    "kafka": r"kafka",
    "spark": r"spark",
    "pandas": r"pandas",
    "numpy": r"numpy",
    "tensorflow": r"tensorflow",
    "pytorch": r"pytorch",
    "scikit-learn": r"scikit-learn|sklearn",
    "machine learning": r"machine\s+learning",
}

CLOUD_DEVOPS_TERMS: dict[str, str] = {
    "aws": r"aws|amazon\s+web\s+services",
    "azure": r"azure",
    "gcp": r"gcp|google\s+cloud(?:\s+platform)?",
    "docker": r"docker",
    "kubernetes": r"kubernetes|k8s",
    "terraform": r"terraform",
    "ansible": r"ansible",
    "jenkins": r"jenkins",
    "ci/cd": r"ci\s*/\s*cd|cicd",
    "github actions": r"github\s+actions",
    "linux": r"linux",
    "serverless": r"serverless",
    "microservices": r"micro-?services",
    "devops": r"devops",
    "helm": r"helm",
    "prometheus": r"prometheus",
    "grafana": r"grafana",
}

METHODOLOGY_TERMS: dict[str, str] = {
    "agile": r"agile",
    "scrum": r"scrum",
    "kanban": r"kanban",
    "waterfall": r"waterfall",
    "lean": r"lean",
    "tdd": r"tdd|test[\s-]driven\s+development",
    "bdd": r"bdd|behaviou?r[\s-]driven\s+development",
    "pair programming": r"pair\s+programming",
    "code review": r"code\s+reviews?",
    "continuous integration": r"continuous\s+integration",
}


def _compile_vocabulary(terms: dict[str, str]) -> dict[str, re.Pattern]:
    return {
        term: re.compile(rf"(?<![\w.+#-])(?:{body})(?![\w+#])", re.IGNORECASE)
        for term, body in terms.items()
    }


TECHNICAL_PATTERNS = _compile_vocabulary(TECHNICAL_TERMS)
CLOUD_DEVOPS_PATTERNS = _compile_vocabulary(CLOUD_DEVOPS_TERMS)
METHODOLOGY_PATTERNS = _compile_vocabulary(METHODOLOGY_TERMS)
VOCABULARY_PATTERNS: dict[str, re.Pattern] = {
    **TECHNICAL_PATTERNS,
    **CLOUD_DEVOPS_PATTERNS,
    **METHODOLOGY_PATTERNS,
}

SOFT_SKILLS: frozenset[str] = frozenset({
    "leadership", "communication", "teamwork", "collaboration", "mentoring",
    "mentorship", "problem-solving", "negotiation", "presentation",
    "stakeholder", "stakeholders", "ownership", "adaptability", "creativity",
    "organization", "coaching", "influence", "interpersonal", "lead",
    "manage", "management", "supervise", "direct",
})

PROCESS_TERMS: frozenset[str] = frozenset({
    *METHODOLOGY_TERMS,
    "compliance", "security", "testing", "documentation", "analytics",
    "budget", "budgeting", "forecasting", "reporting", "operations",
    "governance", "architecture", "deployment", "monitoring", "automation",
    "regulatory", "audit", "quality", "sales", "marketing", "finance",
    "healthcare", "ecommerce", "logistics", "procurement",
})

# Importance tiers for keyword gaps
IMPORTANCE_TECHNICAL = 0.9
IMPORTANCE_SOFT = 0.7
IMPORTANCE_PROCESS = 0.6
IMPORTANCE_DEFAULT = 0.4

# ---------------------------------------------------------------------------
# Synonym groups: any two members of one group are near-equivalents
# ---------------------------------------------------------------------------
SYNONYM_GROUPS: dict[str, frozenset[str]] = {
    "javascript": frozenset({"js", "ecmascript", "node"}),
    "typescript": frozenset({"ts"}),
    "python": frozenset({"py", "python3"}),
    "golang": frozenset({"go"}),
    "postgresql": frozenset({"postgres", "psql"}),
    "kubernetes": frozenset({"k8s", "kube"}),
    "aws": frozenset({"amazon web services", "ec2", "s3"}),
    "gcp": frozenset({"google cloud"}),
    "machine learning": frozenset({"ml", "deep learning"}),
    "ci/cd": frozenset({"continuous integration", "continuous delivery", "cicd"}),
    "rest api": frozenset({"rest", "restful", "api", "apis"}),
    "leadership": frozenset({"lead", "manage", "direct", "supervise", "led", "managed"}),
    "management": frozenset({"manage", "managed", "managing", "oversee", "administration"}),
    "communication": frozenset({"communicate", "presentation", "presenting", "writing"}),
    "collaboration": frozenset({"teamwork", "cooperate", "partner", "cross-functional"}),
    "mentoring": frozenset({"mentor", "mentorship", "coaching", "coach"}),
    "analytics": frozenset({"analysis", "analyze", "analytical", "analyse"}),
    "testing": frozenset({"qa", "quality assurance", "tests", "tdd"}),
    "agile": frozenset({"scrum", "kanban", "sprint", "sprints"}),
}


def _build_synonym_index() -> dict[str, frozenset[str]]:
    index: dict[str, set[str]] = {}
    for head, members in SYNONYM_GROUPS.items():
        for term in (head, *members):
            index.setdefault(term, set()).add(head)
    return {term: frozenset(groups) for term, groups in index.items()}


# term -> heads of every group the term belongs to
SYNONYM_INDEX = _build_synonym_index()


def synonyms_of(term: str) -> list[str]:
    """Every other member of the groups ``term`` belongs to, sorted."""
    related: set[str] = set()
    for head in SYNONYM_INDEX.get(term, ()):
        related.add(head)
        related.update(SYNONYM_GROUPS[head])
    related.discard(term)
    return sorted(related)


def share_synonym_group(a: str, b: str) -> bool:
    return bool(SYNONYM_INDEX.get(a, frozenset()) & SYNONYM_INDEX.get(b, frozenset()))


# ---------------------------------------------------------------------------
# Context categories for semantic matches (checked in order)
# ---------------------------------------------------------------------------
CONTEXT_KEYWORDS: dict[str, tuple[str, ...]] = {
    "technical": (
        "javascript", "typescript", "python", "java", "react", "node", "sql",
        "api", "aws", "azure", "gcp", "docker", "kubernetes", "cloud", "devops",
        "code", "software", "backend", "frontend", "database", "linux", "git",
    ),
    "leadership": (
        "lead", "manag", "direct", "supervis", "mentor", "coach", "strategy",
        "stakeholder", "team", "ownership",
    ),
    "analytics": (
        "analy", "data", "metric", "report", "insight", "statistic", "dashboard",
        "forecast", "research",
    ),
}


def context_for(term: str) -> str:
    for name, fragments in CONTEXT_KEYWORDS.items():
        if any(fragment in term for fragment in fragments):
            return name
    return "general"


# ---------------------------------------------------------------------------
# Classification helpers
# ---------------------------------------------------------------------------

def is_technical(term: str) -> bool:
    return term in TECHNICAL_PATTERNS or term in CLOUD_DEVOPS_PATTERNS


def keyword_category(term: str) -> str:
    if is_technical(term):
        return "technical"
    if term in SOFT_SKILLS:
        return "soft_skill"
    if term in PROCESS_TERMS:
        return "process"
    return "general"


def keyword_importance(term: str) -> float:
    return {
        "technical": IMPORTANCE_TECHNICAL,
        "soft_skill": IMPORTANCE_SOFT,
        "process": IMPORTANCE_PROCESS,
    }.get(keyword_category(term), IMPORTANCE_DEFAULT)


def count_occurrences(term: str, text: str) -> int:
    """Count whole-word occurrences of a term, honouring vocabulary variants."""
    pattern = VOCABULARY_PATTERNS.get(term)
    if pattern is None:
        pattern = re.compile(rf"(?<![\w.+#-]){re.escape(term)}(?![\w+#])", re.IGNORECASE)
    return len(pattern.findall(text))


# ---------------------------------------------------------------------------
# Industries: keyword evidence for detection
# ---------------------------------------------------------------------------
INDUSTRY_KEYWORDS: dict[str, tuple[str, ...]] = {
    "technology": (
        "software", "saas", "cloud", "platform", "api", "engineering", "developer",
        "devops", "startup", "backend", "frontend",
    ),
    "finance": (
        "bank", "banking", "fintech", "trading", "investment", "portfolio",
        "accounting", "payments", "lending", "insurance", "underwriting",
    ),
    "healthcare": (
        "clinical", "patient", "patients", "hospital", "healthcare", "medical",
        "pharma", "hipaa", "ehr", "nursing",
    ),
    "education": (
        "curriculum", "students", "teaching", "school", "university", "edtech",
        "learning management",
    ),
    "marketing": (
        "marketing", "seo", "campaign", "campaigns", "brand", "advertising",
        "social media", "content strategy",
    ),
    "retail": (
        "retail", "ecommerce", "e-commerce", "merchandising", "store", "stores",
        "inventory", "shopper",
    ),
    "manufacturing": (
        "manufacturing", "supply chain", "logistics", "plant", "production line",
        "lean manufacturing", "procurement",
    ),
}

LEARNING_RESOURCE_TEMPLATES = (
    "Official {skill} documentation and tutorials",
    "Hands-on {skill} project to showcase on your resume",
)
