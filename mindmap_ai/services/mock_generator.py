"""
Deterministic fallback content.
Used whenever the AI provider is unavailable or returns unusable output,
so every builder here must succeed for any input string.
"""

from pathlib import PurePath

from mindmap_ai.schemas.mindmap import ChartType, MindMapNode, MindMapResponse
from mindmap_ai.schemas.node_details import (
    DetailedInfo,
    Difficulty,
    LearningPath,
    NodeDetailsResponse,
    PracticalInfo,
)

TOPIC_WORDS = 3

# (id, label, parent id, description); level follows from the parent
_PROMPT_BRANCHES = [
    ("2", "Core Concepts & Fundamentals", "1",
     "Essential building blocks and theoretical foundations that provide the groundwork "
     "for deeper understanding. Includes definitions, principles, and basic terminology."),
    ("3", "Practical Applications", "1",
     "Real-world implementations and use cases demonstrating how theoretical knowledge "
     "translates into practical solutions and everyday applications."),
    ("4", "Advanced Techniques", "1",
     "Sophisticated methods and cutting-edge approaches that represent the current state "
     "of the art in this field, including emerging trends and innovations."),
    ("5", "Tools & Technologies", "1",
     "Essential software, hardware, and methodological tools that professionals use to "
     "implement and work with these concepts effectively."),
    ("6", "Best Practices & Standards", "1",
     "Industry-accepted guidelines, methodologies, and quality standards that ensure "
     "optimal results and professional-grade implementations."),
    ("7", "Common Challenges", "1",
     "Typical obstacles, pitfalls, and difficulties encountered when working in this area, "
     "along with proven strategies for overcoming them."),
    ("8", "Theoretical Framework", "2",
     "Underlying scientific and theoretical principles that explain why and how these "
     "concepts work, providing intellectual foundation."),
    ("9", "Key Terminology", "2",
     "Essential vocabulary and definitions that professionals must understand to "
     "communicate effectively in this field."),
    ("10", "Industry Applications", "3",
     "Specific ways different industries and sectors utilize these concepts to solve "
     "problems and create value."),
    ("11", "Case Studies", "3",
     "Detailed examples of successful implementations, including lessons learned and "
     "measurable outcomes achieved."),
    ("12", "Emerging Trends", "4",
     "Latest developments and future directions that are shaping the evolution of this "
     "field and creating new opportunities."),
    ("13", "Expert Techniques", "4",
     "Advanced methodologies used by leading practitioners to achieve superior results "
     "and maintain competitive advantages."),
]

_FILE_BRANCHES = [
    ("Document Overview",
     "High-level summary of the document's purpose, scope, and main objectives as "
     "identified through content analysis."),
    ("Key Concepts",
     "Primary concepts and ideas that form the foundation of the document's content "
     "and message."),
    ("Main Topics",
     "Central themes and subjects discussed throughout the document, organized by "
     "importance and relevance."),
    ("Supporting Details",
     "Important supporting information, examples, and evidence that reinforce the main "
     "topics and concepts."),
    ("Conclusions & Insights",
     "Key takeaways, conclusions, and insights derived from the document's content "
     "and analysis."),
]


def topic_label(prompt: str) -> str:
    """First few words of the prompt, used as the root label."""
    words = (prompt or "").split()
    return " ".join(words[:TOPIC_WORDS]) or "Main Topic"


def document_label(file_name: str) -> str:
    """Base name up to the first dot: "report.v2.txt" -> "report"."""
    label = PurePath(file_name or "").name.split(".")[0].strip()
    return label or "Document"


def mock_mind_map(prompt: str, chart_type: ChartType = ChartType.hierarchical) -> MindMapResponse:
    """13-node template: root, 6 branches, 2 sub-branches under the first three."""
    topic = topic_label(prompt)
    nodes = [
        MindMapNode(
            id="1",
            text=topic,
            level=0,
            description=(
                f"Central concept exploring {topic}. This comprehensive overview covers "
                "fundamental principles, practical applications, and advanced concepts that "
                "form the foundation of understanding this subject matter."
            ),
        )
    ]
    levels = {"1": 0}
    for node_id, label, parent_id, description in _PROMPT_BRANCHES:
        levels[node_id] = levels[parent_id] + 1
        nodes.append(
            MindMapNode(
                id=node_id,
                text=label,
                level=levels[node_id],
                parent_id=parent_id,
                description=description,
            )
        )
    return MindMapResponse(
        title=f"Comprehensive Mind Map: {topic}",
        chart_type=chart_type,
        nodes=nodes,
    )


def mock_file_mind_map(file_name: str, chart_type: ChartType = ChartType.hierarchical) -> MindMapResponse:
    """Root named after the uploaded file plus five flat branches."""
    label = document_label(file_name)
    nodes = [
        MindMapNode(
            id="1",
            text=label,
            level=0,
            description=(
                f'Comprehensive analysis of the document "{file_name}". This mind map extracts '
                "and organizes the key concepts, main ideas, and important details found within "
                "the document content."
            ),
        )
    ]
    for index, (text, description) in enumerate(_FILE_BRANCHES, start=2):
        nodes.append(
            MindMapNode(
                id=str(index),
                text=text,
                level=1,
                parent_id="1",
                description=description,
            )
        )
    return MindMapResponse(
        title=f"Analysis of {file_name or label}",
        chart_type=chart_type,
        nodes=nodes,
    )


def mock_node_details(node_text: str) -> NodeDetailsResponse:
    name = (node_text or "").strip() or "This topic"
    return NodeDetailsResponse(
        summary=(
            f"{name} represents a fundamental concept that plays a crucial role in its domain. "
            "This topic encompasses various aspects including theoretical foundations, practical "
            "applications, and real-world implementations. Understanding this concept is "
            "essential for anyone looking to gain comprehensive knowledge in this field."
        ),
        key_points=[
            f"Core definition and fundamental principles of {name}",
            "Historical development and evolution of the concept",
            "Key characteristics and distinguishing features",
            "Primary applications and use cases in various industries",
            "Benefits and advantages of implementing this concept",
            "Common challenges and potential solutions",
            "Best practices and industry standards",
            "Future trends and emerging developments",
            "Integration with related concepts and technologies",
            "Practical implementation strategies and methodologies",
        ],
        detailed_info=DetailedInfo(
            definition=(
                f"{name} is a comprehensive concept that encompasses multiple dimensions of "
                "understanding and application. It represents a systematic approach to "
                "organizing, analyzing, and implementing specific methodologies within its domain."
            ),
            applications=[
                "Educational institutions for curriculum development and learning enhancement",
                "Corporate training programs for skill development and knowledge transfer",
                "Research and development projects for innovation and discovery",
                "Project management for planning and execution strategies",
                "Problem-solving frameworks for systematic analysis",
                "Decision-making processes for strategic planning",
                "Knowledge management systems for information organization",
            ],
            benefits=[
                "Enhanced understanding and clarity of complex concepts",
                "Improved problem-solving capabilities and analytical thinking",
                "Better organization and structure of information",
                "Increased efficiency in learning and knowledge retention",
                "Enhanced communication and collaboration among teams",
                "Systematic approach to tackling complex challenges",
                "Improved decision-making through visual representation",
            ],
            challenges=[
                "Initial learning curve and time investment required",
                "Complexity in handling large amounts of information",
                "Need for continuous updates and maintenance",
                "Potential oversimplification of complex relationships",
                "Difficulty in measuring effectiveness and impact",
                "Integration challenges with existing systems and processes",
            ],
            examples=[
                "Academic research projects utilizing structured analysis methods",
                "Business strategy development using systematic frameworks",
                "Software development projects with modular design approaches",
                "Educational curriculum design with progressive learning paths",
                "Marketing campaigns with targeted audience segmentation",
                "Scientific research with hypothesis-driven methodologies",
                "Product development with user-centered design principles",
            ],
            related_concepts=[
                "Systems thinking and holistic analysis approaches",
                "Information architecture and knowledge organization",
                "Cognitive psychology and learning theory principles",
                "Design thinking and creative problem-solving methods",
                "Data visualization and information presentation techniques",
                "Project management methodologies and frameworks",
                "Strategic planning and decision-making processes",
            ],
        ),
        learning_path=LearningPath(
            prerequisites=[
                "Basic understanding of the subject domain and terminology",
                "Familiarity with fundamental concepts and principles",
                "Basic analytical and critical thinking skills",
                "Understanding of information organization principles",
                "Awareness of problem-solving methodologies",
            ],
            next_steps=[
                "Advanced study of specialized techniques and methodologies",
                "Practical application through hands-on projects and exercises",
                "Integration with complementary tools and technologies",
                "Development of expertise through continuous practice",
                "Exploration of emerging trends and innovations",
                "Collaboration with experts and practitioners in the field",
                "Teaching and mentoring others to reinforce understanding",
            ],
            time_estimate=(
                "2-4 weeks for basic understanding, 2-3 months for proficiency, "
                "ongoing for mastery"
            ),
            difficulty=Difficulty.intermediate,
            resources=[
                "Comprehensive textbooks and academic publications",
                "Online courses and interactive learning platforms",
                "Professional workshops and training programs",
                "Industry conferences and networking events",
                "Practical tools and software applications",
            ],
        ),
        practical_info=PracticalInfo(
            how_to_implement=[
                "Start with clear objectives and defined scope",
                "Gather and organize relevant information and resources",
                "Apply systematic methodology and structured approach",
                "Implement iterative process with continuous feedback",
                "Monitor progress and adjust strategies as needed",
                "Evaluate results and document lessons learned",
            ],
            common_mistakes=[
                "Rushing through the process without proper planning",
                "Overlooking important details and relationships",
                "Failing to consider multiple perspectives and viewpoints",
                "Not allowing sufficient time for iteration and refinement",
                "Ignoring feedback and failing to adapt approach",
            ],
            best_practices=[
                "Maintain clear documentation and version control",
                "Involve stakeholders throughout the process",
                "Use proven methodologies and established frameworks",
                "Implement quality assurance and validation procedures",
                "Foster collaboration and knowledge sharing",
                "Continuously update and improve based on experience",
            ],
            tools=[
                "Specialized software applications and platforms",
                "Collaborative tools for team coordination",
                "Analytics and measurement instruments",
                "Documentation and knowledge management systems",
                "Communication and presentation tools",
            ],
        ),
    )
