"""Static content substituted whenever an optional backend endpoint is unreachable."""

from __future__ import annotations

from devops_prep.core.models import (
    FeatureBullet,
    HomepageContent,
    HomepageStat,
    IncidentScenario,
    InterviewPhase,
    InterviewQuestion,
    InterviewScenarios,
    InterviewStage,
    UIConfig,
)

FALLBACK_CATEGORIES: tuple[str, ...] = ("Core Concepts", "Networking", "Configuration")

FALLBACK_UI_CONFIG = UIConfig(
    category_colors={
        "Core Concepts": "bg-blue-100 text-blue-800",
        "Networking": "bg-indigo-100 text-indigo-800",
        "Configuration": "bg-teal-100 text-teal-800",
        "Architecture": "bg-purple-100 text-purple-800",
        "Workloads": "bg-pink-100 text-pink-800",
        "Storage": "bg-cyan-100 text-cyan-800",
        "Security": "bg-red-100 text-red-800",
        "CLI": "bg-lime-100 text-lime-800",
    },
    difficulty_colors={
        "Easy": "bg-green-100 text-green-800",
        "Medium": "bg-yellow-100 text-yellow-800",
        "Hard": "bg-red-100 text-red-800",
    },
    default_color="bg-gray-100 text-gray-800",
    fallback_categories=FALLBACK_CATEGORIES,
)

FALLBACK_INTERVIEW_SCENARIOS = InterviewScenarios(
    phases={
        InterviewStage.PERSONAL: InterviewPhase(
            stage=InterviewStage.PERSONAL,
            title="Getting to Know You",
            icon="User",
            color="blue",
            questions=(
                InterviewQuestion(1, "Tell me about yourself and your background in technology.", 180),
                InterviewQuestion(2, "What got you interested in DevOps specifically?", 120),
                InterviewQuestion(3, "Describe a challenging project you've worked on recently.", 180),
            ),
        ),
        InterviewStage.TECHNICAL: InterviewPhase(
            stage=InterviewStage.TECHNICAL,
            title="Technical Knowledge",
            icon="Code",
            color="green",
            questions=(
                InterviewQuestion(4, "Explain the difference between Docker containers and virtual machines.", 300),
                InterviewQuestion(5, "How would you implement a CI/CD pipeline for a microservices application?", 360),
                InterviewQuestion(6, "What are the key components of Kubernetes architecture?", 300),
            ),
        ),
        InterviewStage.SCENARIO: InterviewPhase(
            stage=InterviewStage.SCENARIO,
            title="Problem Solving",
            icon="AlertTriangle",
            color="red",
            questions=(
                InterviewQuestion(
                    7,
                    "Your production system is experiencing high latency. "
                    "Walk me through your troubleshooting process.",
                    600,
                ),
                InterviewQuestion(
                    8,
                    "How would you handle a critical security vulnerability discovered in production?",
                    480,
                ),
            ),
        ),
    },
    incident_scenarios=(
        IncidentScenario(
            id=1,
            title="Production Outage Response",
            description=(
                "Your e-commerce platform is experiencing a complete outage during Black Friday. "
                "Customer complaints are flooding in, and the CEO is asking for updates every 5 minutes."
            ),
            situation=(
                "**URGENT: Production Down**\n\n"
                "Time: Black Friday, 2:30 PM EST\n"
                "Impact: 100% of users cannot access the website\n"
                "Revenue loss: $50,000 per minute\n\n"
                "Initial symptoms:\n\n"
                "- Website returning 503 errors\n"
                "- Database connections timing out\n"
                "- Load balancer health checks failing\n"
                "- Customer support ticket volume increased 400%\n\n"
                "**Your task:** Lead the incident response and restore service."
            ),
            scenario_type="incident-response",
            time_limit_seconds=300,
            hints=(
                "Start with the basics - check your monitoring dashboards",
                "Is this a code deployment issue or infrastructure?",
                "Don't forget to communicate with stakeholders",
            ),
        ),
        IncidentScenario(
            id=2,
            title="Scaling Crisis",
            description=(
                "Your application just got featured on TechCrunch and traffic has increased 50x "
                "overnight. The infrastructure is buckling under the load."
            ),
            situation=(
                "**SCALING EMERGENCY**\n\n"
                "Your startup's new feature just went viral after a TechCrunch article.\n\n"
                "Current symptoms:\n\n"
                "- Response times increased from 200ms to 5+ seconds\n"
                "- Database connection pool exhausted\n"
                "- CDN hit ratio dropped significantly\n"
                "- Auto-scaling isn't keeping up\n\n"
                "**Your task:** Design a scaling strategy to handle this traffic surge."
            ),
            scenario_type="scenario",
            time_limit_seconds=480,
            hints=(
                "Consider horizontal and vertical scaling",
                "Think about database optimization",
                "What about caching strategies?",
            ),
        ),
    ),
)

FALLBACK_HOMEPAGE_CONTENT = HomepageContent(
    features={
        "quiz": (
            FeatureBullet("Target", "Practice by Category"),
            FeatureBullet("Code", "Real K8s Questions"),
            FeatureBullet("Zap", "Instant Feedback"),
        ),
        "interview": (
            FeatureBullet("Users", "Realistic Interview Flow"),
            FeatureBullet("Clock", "Timed Questions"),
            FeatureBullet("Code", "Debug Scenarios"),
        ),
        "applications": (
            FeatureBullet("Target", "Application Tracking"),
            FeatureBullet("TrendingUp", "Progress Analytics"),
            FeatureBullet("Award", "Status Management"),
        ),
    },
    stats=(
        HomepageStat("500+", "Questions"),
        HomepageStat("15+", "Scenarios"),
        HomepageStat("98%", "Success Rate"),
    ),
    title="DevOps Interview Platform",
    subtitle=(
        "Master DevOps interviews with realistic simulations, Kubernetes practice, and "
        "comprehensive job application tracking. Land your dream DevOps role."
    ),
)
