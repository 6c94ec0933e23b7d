"""dummy_documents.py
Dummy resume and job description texts to use for testing.

SAMPLE_RESUME against SAMPLE_JOB_DESCRIPTION scores 70 with the rule-based engine:
    - required skills: react, docker (react matched) -> skill score 50
    - 5 years of experience against 3+ required      -> experience score 100
    - degree required, bachelor present               -> education score 100
"""

SAMPLE_RESUME = """Jane Doe
jane.doe@example.com

Professional Summary
Software engineer with 5 years of experience building web applications with React and Node.js.

Work Experience
Senior Software Engineer, Acme Corp (2021 - Present)
- Led the migration of the customer portal to React and TypeScript
- Built REST APIs with Node.js and PostgreSQL on AWS

Software Engineer, Initech (2019 - 2021)
- Developed internal dashboards with JavaScript and CSS

Education
Bachelor of Science in Computer Science, State University, 2019

Skills
React, Node.js, TypeScript, JavaScript, PostgreSQL, AWS, Git, Jest
"""

SAMPLE_JOB_DESCRIPTION = """Senior Frontend Engineer

Requirements:
- 3+ years of professional experience building web applications
- Strong React skills
- Docker for local development and deployment
- Bachelor's degree in a technical field

Nice to have:
- Mentoring junior engineers
"""

# Resume without any section headings (chunked as a single content block)
PLAIN_RESUME = (
    "John Smith is a backend developer who has worked with Python, Django and "
    "PostgreSQL since 2018. He maintains Docker based deployment pipelines on AWS."
)

# Resume mentioning work authorization
AUTHORIZED_RESUME = """Alex Kim

Summary
Full stack developer. Authorized to work in the United States without sponsorship.

Skills
Python, React, Docker
"""
