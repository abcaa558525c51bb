"""GK Hub: AI study material and mock tests for Gujarat Police exams."""
