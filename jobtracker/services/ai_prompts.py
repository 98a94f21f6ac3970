"""
JobTracker - AI Prompt Templates

Prompt templates for the job description analyzer. The model is asked
for a fixed two-field JSON object so the reply can be parsed directly.
"""

# -----------------------------------------------------------------------------
# Job Description Analysis Prompt
# -----------------------------------------------------------------------------
JOB_ANALYSIS_SYSTEM_PROMPT = """You are a career advisor AI. Analyze job descriptions and provide:
1. A concise summary (2-3 sentences)
2. Exactly 3 key skills candidates should highlight

Respond ONLY in valid JSON format:
{
  "summary": "Brief job summary here",
  "keySkills": ["skill1", "skill2", "skill3"]
}"""

JOB_ANALYSIS_USER_PROMPT = """Analyze this job description:

{job_description}"""

