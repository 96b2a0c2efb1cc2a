"""Lessons, coding challenges and badges offered to learners.

Code samples are JavaScript, the language the lessons teach.
"""

LESSONS = [
    {
        "id": "variables-1",
        "title": "Introduction to Variables",
        "description": "Learn how to store and use data in your programs",
        "topic": "Variables",
        "difficulty": "beginner",
        "xp_reward": 50,
        "required_level": 1,
        "explanation": (
            "Variables are containers for storing data values. Think of them like boxes "
            "that hold information you want to use later."
        ),
        "example": (
            'let name = "Alice";\n'
            "let age = 25;\n"
            "let isStudent = true;\n\n"
            "console.log(name); // Output: Alice"
        ),
        "quiz": [
            {
                "question": "What keyword is used to declare a variable in JavaScript?",
                "options": ["var", "let", "const", "All of the above"],
                "correct_answer": 3,
            },
        ],
    },
    {
        "id": "functions-1",
        "title": "Creating Functions",
        "description": "Master the art of writing reusable code blocks",
        "topic": "Functions",
        "difficulty": "beginner",
        "xp_reward": 60,
        "required_level": 1,
        "explanation": (
            "Functions are reusable blocks of code that perform a specific task. They help "
            "you organize your code and avoid repetition."
        ),
        "example": (
            "function greet(name) {\n"
            '  return "Hello, " + name + "!";\n'
            "}\n\n"
            'console.log(greet("Bob")); // Output: Hello, Bob!'
        ),
        "quiz": [
            {
                "question": "What keyword is used to define a function?",
                "options": ["func", "function", "def", "method"],
                "correct_answer": 1,
            },
        ],
    },
    {
        "id": "conditionals-1",
        "title": "If Statements",
        "description": "Make decisions in your code with conditionals",
        "topic": "Conditionals",
        "difficulty": "beginner",
        "xp_reward": 55,
        "required_level": 2,
        "explanation": (
            "Conditional statements allow your code to make decisions. The if statement "
            "executes code only when a condition is true."
        ),
        "example": (
            "let score = 85;\n\n"
            "if (score >= 80) {\n"
            '  console.log("Great job!");\n'
            "} else {\n"
            '  console.log("Keep practicing!");\n'
            "}"
        ),
        "quiz": [
            {
                "question": "Which operator checks if two values are equal?",
                "options": ["=", "==", "===", "equals"],
                "correct_answer": 2,
            },
        ],
    },
    {
        "id": "loops-1",
        "title": "Understanding Loops",
        "description": "Repeat actions efficiently with for and while loops",
        "topic": "Loops",
        "difficulty": "intermediate",
        "xp_reward": 70,
        "required_level": 3,
        "explanation": (
            "Loops allow you to repeat a block of code multiple times. This is useful when "
            "you need to perform the same action many times."
        ),
        "example": (
            "for (let i = 0; i < 5; i++) {\n"
            '  console.log("Count: " + i);\n'
            "}\n\n"
            "// Output: Count: 0, 1, 2, 3, 4"
        ),
        "quiz": [
            {
                "question": "What does i++ do in a for loop?",
                "options": ["Decreases i by 1", "Increases i by 1", "Multiplies i by 1", "Nothing"],
                "correct_answer": 1,
            },
        ],
    },
    {
        "id": "arrays-1",
        "title": "Working with Arrays",
        "description": "Store and manipulate lists of data",
        "topic": "Arrays",
        "difficulty": "intermediate",
        "xp_reward": 65,
        "required_level": 4,
        "explanation": (
            "Arrays are used to store multiple values in a single variable. Each value has "
            "an index starting from 0."
        ),
        "example": (
            'let fruits = ["apple", "banana", "orange"];\n\n'
            "console.log(fruits[0]); // Output: apple\n"
            'fruits.push("grape"); // Add to end\n'
            "console.log(fruits.length); // Output: 4"
        ),
        "quiz": [
            {
                "question": "What is the index of the first element in an array?",
                "options": ["1", "0", "-1", "It depends"],
                "correct_answer": 1,
            },
        ],
    },
]

CHALLENGES = [
    {
        "id": "challenge-1",
        "title": "Double the Number",
        "description": "Write a function that doubles a number",
        "difficulty": "easy",
        "xp_reward": 80,
        "required_level": 2,
        "topic": "Functions",
        "problem": (
            "Create a function called `doubleNumber` that takes a number as input and "
            "returns that number multiplied by 2."
        ),
        "starter_code": (
            "function doubleNumber(num) {\n"
            "  // Your code here\n"
            "  \n"
            "}\n\n"
            "// Test your function\n"
            "console.log(doubleNumber(5)); // Should output: 10"
        ),
        "solution": "function doubleNumber(num) {\n  return num * 2;\n}",
        "test_cases": [
            {"input": "5", "expected": "10"},
            {"input": "0", "expected": "0"},
            {"input": "-3", "expected": "-6"},
        ],
        "hints": [
            "Use the * operator to multiply",
            "Remember to use the return keyword",
        ],
    },
    {
        "id": "challenge-2",
        "title": "Even or Odd",
        "description": "Determine if a number is even or odd",
        "difficulty": "easy",
        "xp_reward": 85,
        "required_level": 3,
        "topic": "Conditionals",
        "problem": (
            "Create a function called `isEven` that returns true if a number is even, "
            "and false if it is odd."
        ),
        "starter_code": (
            "function isEven(num) {\n"
            "  // Your code here\n"
            "  \n"
            "}\n\n"
            "// Test your function\n"
            "console.log(isEven(4)); // Should output: true\n"
            "console.log(isEven(7)); // Should output: false"
        ),
        "solution": "function isEven(num) {\n  return num % 2 === 0;\n}",
        "test_cases": [
            {"input": "4", "expected": "true"},
            {"input": "7", "expected": "false"},
            {"input": "0", "expected": "true"},
        ],
        "hints": [
            "Use the modulo operator (%) to find the remainder",
            "If num % 2 equals 0, the number is even",
        ],
    },
    {
        "id": "challenge-3",
        "title": "Sum Array",
        "description": "Calculate the sum of all numbers in an array",
        "difficulty": "medium",
        "xp_reward": 100,
        "required_level": 5,
        "topic": "Arrays & Loops",
        "problem": (
            "Create a function called `sumArray` that takes an array of numbers and "
            "returns their sum."
        ),
        "starter_code": (
            "function sumArray(numbers) {\n"
            "  // Your code here\n"
            "  \n"
            "}\n\n"
            "// Test your function\n"
            "console.log(sumArray([1, 2, 3, 4])); // Should output: 10"
        ),
        "solution": (
            "function sumArray(numbers) {\n"
            "  let sum = 0;\n"
            "  for (let i = 0; i < numbers.length; i++) {\n"
            "    sum += numbers[i];\n"
            "  }\n"
            "  return sum;\n"
            "}"
        ),
        "test_cases": [
            {"input": "[1, 2, 3, 4]", "expected": "10"},
            {"input": "[0, 0, 0]", "expected": "0"},
            {"input": "[5, -3, 2]", "expected": "4"},
        ],
        "hints": [
            "Initialize a variable to store the sum",
            "Use a for loop to iterate through the array",
            "Add each element to your sum variable",
        ],
    },
    {
        "id": "challenge-4",
        "title": "Reverse String",
        "description": "Reverse the characters in a string",
        "difficulty": "medium",
        "xp_reward": 95,
        "required_level": 4,
        "topic": "Strings",
        "problem": (
            "Create a function called `reverseString` that takes a string and returns it reversed."
        ),
        "starter_code": (
            "function reverseString(str) {\n"
            "  // Your code here\n"
            "  \n"
            "}\n\n"
            "// Test your function\n"
            'console.log(reverseString("hello")); // Should output: "olleh"'
        ),
        "solution": "function reverseString(str) {\n  return str.split('').reverse().join('');\n}",
        "test_cases": [
            {"input": '"hello"', "expected": '"olleh"'},
            {"input": '"code"', "expected": '"edoc"'},
            {"input": '"a"', "expected": '"a"'},
        ],
        "hints": [
            "You can convert a string to an array using split()",
            "Arrays have a reverse() method",
            "Use join() to convert the array back to a string",
        ],
    },
    {
        "id": "challenge-5",
        "title": "FizzBuzz",
        "description": "The classic FizzBuzz challenge",
        "difficulty": "hard",
        "xp_reward": 120,
        "required_level": 6,
        "topic": "Logic",
        "problem": (
            "Create a function that prints numbers from 1 to n. For multiples of 3, print "
            '"Fizz" instead of the number. For multiples of 5, print "Buzz". For multiples '
            'of both 3 and 5, print "FizzBuzz".'
        ),
        "starter_code": (
            "function fizzBuzz(n) {\n"
            "  // Your code here\n"
            "  \n"
            "}\n\n"
            "// Test your function\n"
            "fizzBuzz(15);"
        ),
        "solution": (
            "function fizzBuzz(n) {\n"
            "  for (let i = 1; i <= n; i++) {\n"
            "    if (i % 3 === 0 && i % 5 === 0) {\n"
            '      console.log("FizzBuzz");\n'
            "    } else if (i % 3 === 0) {\n"
            '      console.log("Fizz");\n'
            "    } else if (i % 5 === 0) {\n"
            '      console.log("Buzz");\n'
            "    } else {\n"
            "      console.log(i);\n"
            "    }\n"
            "  }\n"
            "}"
        ),
        "test_cases": [
            {"input": "3", "expected": "Fizz"},
            {"input": "5", "expected": "Buzz"},
            {"input": "15", "expected": "FizzBuzz"},
        ],
        "hints": [
            "Check for divisibility by both 3 and 5 first",
            "Use the modulo operator (%)",
            "Use if-else statements for the conditions",
        ],
    },
]

BADGES = [
    {"id": "first-lesson", "name": "First Steps", "description": "Complete your first lesson"},
    {"id": "first-five", "name": "Learning Streak", "description": "Complete 5 lessons"},
    {"id": "challenge-master", "name": "Challenge Master", "description": "Complete 3 challenges"},
    {"id": "level-five", "name": "Rising Star", "description": "Reach Level 5"},
    {"id": "perfect-score", "name": "Perfectionist", "description": "Get 100% on any quiz"},
    {"id": "week-streak", "name": "Dedicated Learner", "description": "Maintain a 7-day streak"},
]
