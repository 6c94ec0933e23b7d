"""screen_resume_cli.py
Run ResumeScreeningFramework from the command line.
Example: `python screen_resume_cli.py path/to/resume.pdf path/to/job_description.txt`

Any further arguments are asked as chat questions about the resume:
`python screen_resume_cli.py resume.pdf job.txt "How many years of experience?"`
"""
import sys

from resume_match.screening_framework import ResumeScreeningFramework


def main():
    if len(sys.argv) < 3:
        print("Usage: python screen_resume_cli.py <resume_path> <job_description_path> [question ...]")
        sys.exit(1)

    resume_path, job_description_path, *questions = sys.argv[1:]

    framework = ResumeScreeningFramework()

    # Files are passed by path so nothing is copied or deleted here
    session, _ = framework.upload_resume(resume_path)
    framework.upload_job_description(job_description_path, session.session_id)

    analysis, resume_info = framework.analyze(session.session_id)

    print("Resume Screening Result:")
    print(f"Match Score: {analysis.match_score}/100")
    print(f"Assessment: {analysis.overall_assessment}")
    print("Strengths:")
    for strength in analysis.strengths or ["None"]:
        print(f"  - {strength}")
    print("Gaps:")
    for gap in analysis.gaps or ["None"]:
        print(f"  - {gap}")
    print(f"Skills: {', '.join(resume_info.skills) if resume_info.skills else 'None'}")
    print(f"Summary: {resume_info.summary}")

    for question in questions:
        response = framework.chat(question, session.session_id)
        print(f"\nQ: {question}\nA: {response.answer}")


if __name__ == "__main__":
    main()
