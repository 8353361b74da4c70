# Routers are imported directly from submodules by `staff_skills.api.app`.
