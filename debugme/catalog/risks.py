"""Automation risk per career, keyed by career name."""

AUTOMATION_RISKS = {
    "Data Scientist": {
        "level": "medium",
        "percentage": 45,
        "task_breakdown": [
            {"task": "Data cleaning and preprocessing", "risk_level": "high",
             "automation_likelihood": "80% - Automated tools can handle routine data cleaning"},
            {"task": "Statistical analysis and modeling", "risk_level": "medium",
             "automation_likelihood": "50% - AI can assist but human insight needed for interpretation"},
            {"task": "Business strategy and communication", "risk_level": "low",
             "automation_likelihood": "20% - Requires human judgment and stakeholder interaction"},
            {"task": "Complex problem-solving and research", "risk_level": "low",
             "automation_likelihood": "25% - Creative problem-solving remains human domain"},
        ],
        "adaptation_strategies": [
            "Focus on strategic thinking and business acumen",
            "Develop expertise in domain-specific knowledge",
            "Enhance communication and storytelling skills",
            "Learn to work alongside AI tools rather than compete",
            "Specialize in areas requiring human judgment (ethics, bias detection)",
        ],
        "complementary_skills": ["Communication", "Leadership", "Creativity", "Problem Solving"],
    },
    "Software Engineer": {
        "level": "medium",
        "percentage": 40,
        "task_breakdown": [
            {"task": "Code generation for routine tasks", "risk_level": "high",
             "automation_likelihood": "70% - AI coding assistants can generate boilerplate code"},
            {"task": "Bug fixing and debugging", "risk_level": "medium",
             "automation_likelihood": "45% - AI can help identify issues but complex debugging requires human insight"},
            {"task": "System architecture and design", "risk_level": "low",
             "automation_likelihood": "25% - Requires deep understanding of business needs and trade-offs"},
            {"task": "Code review and team collaboration", "risk_level": "low",
             "automation_likelihood": "30% - Human judgment needed for code quality and team dynamics"},
        ],
        "adaptation_strategies": [
            "Focus on system design and architecture",
            "Develop expertise in complex problem-solving",
            "Enhance collaboration and mentoring skills",
            "Learn to leverage AI tools to increase productivity",
            "Specialize in areas requiring security and performance optimization",
        ],
        "complementary_skills": ["Problem Solving", "Collaboration", "Communication", "Adaptability"],
    },
    "UX Designer": {
        "level": "low",
        "percentage": 25,
        "task_breakdown": [
            {"task": "Basic wireframing and prototyping", "risk_level": "medium",
             "automation_likelihood": "40% - AI tools can generate initial designs but lack human creativity"},
            {"task": "User research and empathy", "risk_level": "low",
             "automation_likelihood": "15% - Understanding human emotions and needs requires human insight"},
            {"task": "Creative design and aesthetics", "risk_level": "low",
             "automation_likelihood": "20% - Artistic vision and creativity are uniquely human"},
            {"task": "Stakeholder communication and strategy", "risk_level": "low",
             "automation_likelihood": "10% - Requires human interaction and negotiation skills"},
        ],
        "adaptation_strategies": [
            "Deepen user research and empathy skills",
            "Focus on strategic design thinking",
            "Enhance storytelling and presentation abilities",
            "Develop expertise in accessibility and inclusive design",
            "Build strong collaboration skills with cross-functional teams",
        ],
        "complementary_skills": ["Creativity", "Communication", "Collaboration", "Curiosity"],
    },
    "Cybersecurity Specialist": {
        "level": "low",
        "percentage": 30,
        "task_breakdown": [
            {"task": "Automated threat detection", "risk_level": "medium",
             "automation_likelihood": "50% - AI can detect patterns but human analysis needed for context"},
            {"task": "Vulnerability scanning", "risk_level": "high",
             "automation_likelihood": "75% - Automated tools excel at finding known vulnerabilities"},
            {"task": "Incident response and forensics", "risk_level": "low",
             "automation_likelihood": "25% - Complex investigations require human judgment and experience"},
            {"task": "Security strategy and policy", "risk_level": "low",
             "automation_likelihood": "15% - Strategic planning requires understanding business context"},
        ],
        "adaptation_strategies": [
            "Focus on advanced threat hunting and incident response",
            "Develop expertise in security architecture",
            "Enhance communication skills for explaining risks to stakeholders",
            "Learn to leverage AI for threat intelligence while maintaining human oversight",
            "Specialize in areas requiring ethical judgment (privacy, compliance)",
        ],
        "complementary_skills": ["Analytical Thinking", "Problem Solving", "Communication", "Adaptability"],
    },
    "Machine Learning Engineer": {
        "level": "medium",
        "percentage": 35,
        "task_breakdown": [
            {"task": "Model training and hyperparameter tuning", "risk_level": "medium",
             "automation_likelihood": "55% - AutoML can automate some tasks but expert knowledge still needed"},
            {"task": "Data pipeline development", "risk_level": "high",
             "automation_likelihood": "65% - Many data engineering tasks can be automated"},
            {"task": "Model interpretation and ethics", "risk_level": "low",
             "automation_likelihood": "20% - Understanding bias and fairness requires human judgment"},
            {"task": "Research and innovation", "risk_level": "low",
             "automation_likelihood": "25% - Novel research and creative solutions remain human domain"},
        ],
        "adaptation_strategies": [
            "Focus on model interpretability and ethics",
            "Develop expertise in specialized domains (healthcare, finance, etc.)",
            "Enhance research and innovation capabilities",
            "Learn to design AI systems that augment human capabilities",
            "Specialize in areas requiring domain expertise and human judgment",
        ],
        "complementary_skills": ["Analytical Thinking", "Curiosity", "Problem Solving", "Communication"],
    },
    "Tech Entrepreneur": {
        "level": "low",
        "percentage": 20,
        "task_breakdown": [
            {"task": "Market research and analysis", "risk_level": "medium",
             "automation_likelihood": "40% - AI can gather data but strategic insights require human judgment"},
            {"task": "Business strategy and vision", "risk_level": "low",
             "automation_likelihood": "10% - Vision and strategic thinking are uniquely human"},
            {"task": "Team building and leadership", "risk_level": "low",
             "automation_likelihood": "5% - Human relationships and motivation cannot be automated"},
            {"task": "Innovation and creativity", "risk_level": "low",
             "automation_likelihood": "15% - Creative problem-solving and innovation require human insight"},
        ],
        "adaptation_strategies": [
            "Focus on building strong human relationships",
            "Develop deep domain expertise in your industry",
            "Enhance leadership and team-building skills",
            "Learn to leverage AI tools for market insights while maintaining strategic vision",
            "Build skills in areas that require human judgment (negotiation, fundraising, partnerships)",
        ],
        "complementary_skills": ["Leadership", "Creativity", "Communication", "Adaptability"],
    },
}
