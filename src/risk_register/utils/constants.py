PRIORITY_CRITICAL = 1
PRIORITY_HIGH = 2
PRIORITY_MODERATE = 3
PRIORITIES = (PRIORITY_CRITICAL, PRIORITY_HIGH, PRIORITY_MODERATE)

STATUS_NOT_STARTED = "NotStarted"
STATUS_IN_PROGRESS = "InProgress"
STATUS_COMPLETED = "Completed"
STATUSES = (STATUS_NOT_STARTED, STATUS_IN_PROGRESS, STATUS_COMPLETED)

STATUS_CYCLE = {
    STATUS_NOT_STARTED: STATUS_IN_PROGRESS,
    STATUS_IN_PROGRESS: STATUS_COMPLETED,
    STATUS_COMPLETED: STATUS_NOT_STARTED,
}

AREAS = ("Structural", "Systems", "Regulatory", "Insurance", "Documentation")
LEGAL_RISKS = ("Criminal", "Civil", "Administrative", "Property")
COST_RANGES = ("low", "medium", "high")

URGENCY_IMMEDIATE = "Immediate"
URGENCY_SHORT_TERM = "ShortTerm"
URGENCY_MID_TERM = "MidTerm"
URGENCY_LONG_TERM = "LongTerm"
URGENCIES = (URGENCY_IMMEDIATE, URGENCY_SHORT_TERM, URGENCY_MID_TERM, URGENCY_LONG_TERM)
NEAR_TERM_URGENCIES = frozenset({URGENCY_IMMEDIATE, URGENCY_SHORT_TERM})
LONG_RANGE_URGENCIES = frozenset({URGENCY_MID_TERM, URGENCY_LONG_TERM})

# Matrix layout (0-100 plot scale)
URGENCY_X_BASE = {
    URGENCY_IMMEDIATE: 85,
    URGENCY_SHORT_TERM: 65,
    URGENCY_MID_TERM: 35,
    URGENCY_LONG_TERM: 15,
}
UNKNOWN_URGENCY_X = 10
COST_Y_FLOOR = 10.0
COST_Y_CEILING = 90.0
COST_LOG_MIN = 2.0
COST_LOG_MAX = 5.0
PLOT_MIN = 5
PLOT_MAX = 95

PRIORITY_SIZES = {PRIORITY_CRITICAL: 400, PRIORITY_HIGH: 200, PRIORITY_MODERATE: 100}
PRIORITY_COLORS = {PRIORITY_CRITICAL: "#EF4444", PRIORITY_HIGH: "#F97316", PRIORITY_MODERATE: "#EAB308"}
STATUS_COLORS = {
    STATUS_NOT_STARTED: "#EF4444",
    STATUS_IN_PROGRESS: "#F59E0B",
    STATUS_COMPLETED: "#10B981",
}

JITTER_INDEX = "index"
JITTER_ID = "id"
JITTER_SOURCES = (JITTER_INDEX, JITTER_ID)

QUADRANT_PRIORITY_INVESTMENTS = "priority_investments"
QUADRANT_QUICK_WINS = "quick_wins"
QUADRANT_STRATEGIC_PLANNING = "strategic_planning"

REPORT_RESOLUTION = "resolution"
REPORT_MAINTENANCE_PLAN = "maintenance_plan"
REPORT_INSURANCE_AUDIT = "insurance_audit"
REPORT_HANDOVER_CHECKLIST = "handover_checklist"

REPORT_CATALOGUE = {
    REPORT_RESOLUTION: {
        "name": "Assembly Resolution Proposal",
        "description": "Priority 1 and 2 issues with their estimated quotes, ready for the owners' assembly.",
        "heading": "Proposed Priority Works (Urgent)",
        "columns": ["Priority", "Work", "Owner", "Estimated Cost"],
    },
    REPORT_MAINTENANCE_PLAN: {
        "name": "Three-Year Maintenance Plan",
        "description": "Roadmap of all works ordered by deadline, with expected cash flow.",
        "heading": "Works Planning (All)",
        "columns": ["Deadline", "Work", "Urgency", "Cost"],
    },
    REPORT_INSURANCE_AUDIT: {
        "name": "Insurance Audit Report",
        "description": "Current state of risks for renegotiating the building insurance policy.",
        "heading": "Full Issue Summary",
        "columns": ["Title", "Area", "Status"],
    },
    REPORT_HANDOVER_CHECKLIST: {
        "name": "Handover Checklist",
        "description": "Documentation list and compliance status to protect the administrator.",
        "heading": "Full Issue Summary",
        "columns": ["Title", "Area", "Status"],
    },
}
