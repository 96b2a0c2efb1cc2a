"""Competency and career reference tables."""

COMPETENCIES = [
    {"name": "Programming Logic", "category": "Technical",
     "description": "Ability to understand algorithms and logical structures"},
    {"name": "Creativity", "category": "Behavioral",
     "description": "Ability to propose innovative and original solutions"},
    {"name": "Collaboration", "category": "Behavioral",
     "description": "Work well in teams and share knowledge"},
    {"name": "Adaptability", "category": "Behavioral",
     "description": "Ability to adjust quickly to changes"},
    {"name": "Analytical Thinking", "category": "Technical",
     "description": "Analyze data and problems in a structured way"},
    {"name": "Artificial Intelligence", "category": "Technical",
     "description": "Knowledge of AI algorithms and tools"},
    {"name": "Communication", "category": "Behavioral",
     "description": "Express ideas clearly and objectively"},
    {"name": "Problem Solving", "category": "Behavioral",
     "description": "Diagnose and solve problems effectively"},
    {"name": "Curiosity", "category": "Behavioral",
     "description": "Continuous desire to learn new things"},
    {"name": "Leadership", "category": "Behavioral",
     "description": "Influence and motivate people to achieve goals"},
]

COMPETENCY_LEARNING_PATHS = {
    "Programming Logic": [
        "Introductory logic course on Codecademy",
        "Solve challenges on platforms like HackerRank or LeetCode",
    ],
    "Creativity": [
        "Practice brainstorming and design thinking",
        "Participate in innovation workshops",
    ],
    "Collaboration": [
        "Work on team projects",
        "Study agile methodologies",
    ],
    "Adaptability": [
        "Take courses on change management",
        "Exercise flexibility in multidisciplinary projects",
    ],
    "Analytical Thinking": [
        "Learn basic statistics and data analysis",
        "Practice interpreting dashboards and graphs",
    ],
    "Artificial Intelligence": [
        "Take an introduction to Machine Learning course",
        "Explore AI libraries like TensorFlow or PyTorch",
    ],
    "Communication": [
        "Participate in debates and presentations",
        "Study storytelling techniques",
    ],
    "Problem Solving": [
        "Practice logic and puzzles",
        "Apply methodologies like Design Thinking",
    ],
    "Curiosity": [
        "Read articles from different areas regularly",
        "Explore new hobbies and tools",
    ],
    "Leadership": [
        "Take team management courses",
        "Read biographies of inspiring leaders",
    ],
}

CAREERS = [
    {
        "name": "Data Scientist",
        "required_competencies": {
            "Programming Logic": 0.25,
            "Analytical Thinking": 0.30,
            "Curiosity": 0.10,
            "Collaboration": 0.10,
            "Problem Solving": 0.25,
        },
        "learning_path": [
            "Python programming course",
            "Specialization in data science and statistics",
            "Practical data analysis projects",
        ],
    },
    {
        "name": "Software Engineer",
        "required_competencies": {
            "Programming Logic": 0.30,
            "Problem Solving": 0.25,
            "Collaboration": 0.15,
            "Adaptability": 0.15,
            "Communication": 0.15,
        },
        "learning_path": [
            "Advanced object-oriented programming course",
            "Practice versioning with Git and GitHub",
            "Contribute to open source projects",
        ],
    },
    {
        "name": "UX Designer",
        "required_competencies": {
            "Creativity": 0.30,
            "Communication": 0.20,
            "Curiosity": 0.10,
            "Collaboration": 0.20,
            "Adaptability": 0.20,
        },
        "learning_path": [
            "User interface and experience design courses",
            "Usability and user behavior studies",
            "Build a portfolio with design projects",
        ],
    },
    {
        "name": "Cybersecurity Specialist",
        "required_competencies": {
            "Programming Logic": 0.20,
            "Analytical Thinking": 0.30,
            "Problem Solving": 0.30,
            "Adaptability": 0.20,
        },
        "learning_path": [
            "Information security training",
            "Certifications like CEH or CompTIA Security+",
            "Practice in capture the flag (CTF) environments",
        ],
    },
    {
        "name": "Machine Learning Engineer",
        "required_competencies": {
            "Programming Logic": 0.20,
            "Artificial Intelligence": 0.40,
            "Analytical Thinking": 0.25,
            "Curiosity": 0.15,
        },
        "learning_path": [
            "Intensive Machine Learning course",
            "AI projects applied to real problems",
            "Study advanced learning algorithms",
        ],
    },
    {
        "name": "Tech Entrepreneur",
        "required_competencies": {
            "Creativity": 0.30,
            "Leadership": 0.30,
            "Adaptability": 0.20,
            "Communication": 0.20,
        },
        "learning_path": [
            "Entrepreneurship and innovation courses",
            "Participation in hackathons and incubators",
            "Reading about business models and startups",
        ],
    },
]
