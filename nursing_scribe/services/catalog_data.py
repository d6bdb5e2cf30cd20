"""
Field catalog source data.

``DETAILED_FIELDS`` are the fields the scribe is tuned for: each carries
synonyms, extraction hints and validation rules written by the nursing
informatics team. ``FORM_FIELDS`` lists the remaining assessment form
fields in compact form; the catalog derives default hints for them.
"""

from __future__ import annotations

from typing import Any

SECTIONS: dict[str, str] = {
    "general": "General Information",
    "physical": "Physical Assessment",
    "risk": "Risk Assessment",
    "social": "Social Assessment",
    "communication": "Communication/Respiration/Mobility",
    "elimination": "Elimination",
    "nutrition": "Nutrition/Self-Care",
    "skin-pain": "Skin/Pain Assessment",
    "emotion-remark": "Emotion/Remark",
}

YES_NO = ("Yes", "No")
URINALYSIS_GRADES = ("Negative", "Trace", "+", "++", "+++ or above")
LIMB_STATES = ("Normal", "Weakness", "Paralysis", "Contracture", "Rigid")
DENTURE_TYPES = ("Nil", "Fixed", "Removable")
INDEPENDENCE = ("Independent", "Assisted", "Dependent")


DETAILED_FIELDS: list[dict[str, Any]] = [
    # ── Physical Assessment: vital signs ────────────────────────
    {
        "field_id": "temperature",
        "section_id": "physical",
        "label": "Temperature",
        "field_type": "number",
        "expected_format": "##.#°C",
        "unit": "°C",
        "synonyms": ["temp", "body temperature", "fever", "pyrexia", "temperature reading"],
        "validation_rules": {"min": 30, "max": 45},
        "extraction_hints": [
            "Look for temperature values in Celsius",
            "May be mentioned as fever or high temp",
            "Normal range 36-37.5°C",
        ],
    },
    {
        "field_id": "pulse",
        "section_id": "physical",
        "label": "Pulse Rate",
        "field_type": "number",
        "expected_format": "## bpm",
        "unit": "bpm",
        "synonyms": ["heart rate", "HR", "beats per minute", "bpm", "cardiac rate"],
        "validation_rules": {"min": 40, "max": 200},
        "extraction_hints": [
            "Look for pulse or heart rate values",
            "Usually expressed as beats per minute",
            "Normal range 60-100 bpm",
        ],
    },
    {
        "field_id": "bp_systolic",
        "section_id": "physical",
        "label": "Systolic Blood Pressure",
        "field_type": "number",
        "expected_format": "### mmHg",
        "unit": "mmHg",
        "synonyms": ["systolic BP", "systolic pressure", "upper BP", "blood pressure systolic"],
        "validation_rules": {"min": 60, "max": 250},
        "extraction_hints": [
            "First number in blood pressure reading",
            "Look for BP format like 120/80 or 120 over 80",
            "Normal range 100-140 mmHg",
        ],
    },
    {
        "field_id": "bp_diastolic",
        "section_id": "physical",
        "label": "Diastolic Blood Pressure",
        "field_type": "number",
        "expected_format": "## mmHg",
        "unit": "mmHg",
        "synonyms": ["diastolic BP", "diastolic pressure", "lower BP", "blood pressure diastolic"],
        "validation_rules": {"min": 40, "max": 130},
        "extraction_hints": [
            "Second number in blood pressure reading",
            "Look for BP format like 120/80 or 120 over 80",
            "Normal range 60-90 mmHg",
        ],
    },
    {
        "field_id": "respiratory_rate",
        "section_id": "physical",
        "label": "Respiratory Rate",
        "field_type": "number",
        "expected_format": "## breaths/min",
        "unit": "/min",
        "synonyms": ["RR", "respiration rate", "breathing rate", "breaths per minute"],
        "validation_rules": {"min": 8, "max": 40},
        "extraction_hints": [
            "Look for respiratory or breathing rate",
            "Usually expressed as breaths per minute",
            "Normal range 12-20 breaths/min",
        ],
    },
    {
        "field_id": "spo2",
        "section_id": "physical",
        "label": "Oxygen Saturation",
        "field_type": "number",
        "expected_format": "##%",
        "unit": "%",
        "synonyms": ["SpO2", "oxygen saturation", "O2 sat", "pulse oximetry", "oxygen level"],
        "validation_rules": {"min": 70, "max": 100},
        "extraction_hints": [
            "Look for SpO2 or oxygen saturation",
            "Usually expressed as percentage",
            "Normal range 95-100%",
        ],
    },
    # ── Physical Assessment: clinical status ────────────────────
    {
        "field_id": "current_complaint",
        "section_id": "physical",
        "label": "Current Complaint",
        "field_type": "textarea",
        "synonyms": ["chief complaint", "presenting complaint", "main problem", "primary concern", "symptoms"],
        "extraction_hints": [
            "Patient's main reason for admission",
            "Primary symptoms or concerns",
            "What brought patient to hospital",
        ],
    },
    {
        "field_id": "level_of_consciousness",
        "section_id": "physical",
        "label": "Level of Consciousness",
        "field_type": "radio",
        "synonyms": ["LOC", "consciousness level", "alertness", "mental state", "awareness", "AVPU"],
        "options": ["Alert", "Response to Voice", "Response to Pain", "Unresponsive"],
        "extraction_hints": [
            "Patient's alertness and awareness level on the AVPU scale",
            "May be described as alert, drowsy, responds to voice or pain",
            "Part of neurological assessment",
        ],
    },
    # ── Skin/Pain ───────────────────────────────────────────────
    {
        "field_id": "pain_scale",
        "section_id": "skin-pain",
        "label": "Pain Scale (0-10)",
        "field_type": "number",
        "expected_format": "#/10",
        "unit": "/10",
        "synonyms": ["pain score", "pain level", "pain rating", "pain intensity", "VAS score"],
        "validation_rules": {"min": 0, "max": 10},
        "extraction_hints": [
            "Numeric pain rating 0-10",
            "0 = no pain, 10 = worst pain",
            "May be described as mild/moderate/severe",
        ],
    },
    {
        "field_id": "pain_location",
        "section_id": "skin-pain",
        "label": "Pain Location",
        "field_type": "text",
        "synonyms": ["where is pain", "pain site", "location of pain", "painful area"],
        "extraction_hints": [
            "Where patient feels pain",
            "Body part or region affected",
            "May be multiple locations",
        ],
    },
    # ── Risk Assessment: Morse Fall Scale ───────────────────────
    {
        "field_id": "morse_history_falling",
        "section_id": "risk",
        "label": "History of Falling",
        "field_type": "radio",
        "options": ["No (0 points)", "Yes (25 points)"],
        "synonyms": [
            "fall history", "previous falls", "history of falls", "fallen before",
            "I fell", "fall down", "falling", "tripped", "stumbled", "跌倒", "跌咗",
        ],
        "extraction_hints": [
            "Has patient fallen in past 3 months",
            "Any mention of previous falls or accidents",
            "Falls risk factor",
            'Listen for phrases like "I fell three times last week"',
        ],
    },
    {
        "field_id": "morse_secondary_diagnosis",
        "section_id": "risk",
        "label": "Secondary Diagnosis",
        "field_type": "radio",
        "options": ["No (0 points)", "Yes (15 points)"],
        "synonyms": ["multiple diagnoses", "comorbidities", "other conditions", "additional diagnosis"],
        "extraction_hints": [
            "Does patient have more than one medical diagnosis",
            "Multiple conditions or comorbidities",
            "Secondary medical problems",
        ],
    },
    {
        "field_id": "morse_ambulatory_aid",
        "section_id": "risk",
        "label": "Ambulatory Aid",
        "field_type": "radio",
        "options": [
            "None/bed rest/nurse assist (0 points)",
            "Crutches/cane/walker (15 points)",
            "Furniture (30 points)",
        ],
        "synonyms": ["walking aid", "mobility aid", "assistance walking", "cane", "walker", "crutches"],
        "extraction_hints": [
            "What patient uses to walk",
            "Walking aids or support needed",
            "Independence in mobility",
        ],
    },
    {
        "field_id": "morse_iv_therapy",
        "section_id": "risk",
        "label": "IV Therapy/Heparin Lock",
        "field_type": "radio",
        "options": ["No (0 points)", "Yes (20 points)"],
        "synonyms": ["IV line", "intravenous", "heparin lock", "IV access", "venous access"],
        "extraction_hints": [
            "Does patient have IV line or heparin lock",
            "Intravenous access present",
            "IV therapy ongoing",
        ],
    },
    {
        "field_id": "morse_gait",
        "section_id": "risk",
        "label": "Gait/Transferring",
        "field_type": "radio",
        "options": ["Normal/bed rest/immobile (0 points)", "Weak (10 points)", "Impaired (20 points)"],
        "synonyms": ["walking pattern", "gait pattern", "walking ability", "mobility", "transfer ability"],
        "extraction_hints": [
            "How patient walks or moves",
            "Stability when walking",
            "Transfer independence",
        ],
    },
    {
        "field_id": "morse_mental_status",
        "section_id": "risk",
        "label": "Mental Status",
        "field_type": "radio",
        "options": ["Oriented to own ability (0 points)", "Forgets limitations (15 points)"],
        "synonyms": ["mental state", "cognition", "awareness", "orientation", "confusion"],
        "extraction_hints": [
            "Patient's mental awareness of limitations",
            "Does patient overestimate abilities",
            "Cognitive awareness of safety",
        ],
    },
    # ── Communication ───────────────────────────────────────────
    {
        "field_id": "hearing_status",
        "section_id": "communication",
        "label": "Hearing Status",
        "field_type": "select",
        "synonyms": ["hearing", "auditory", "deaf", "hard of hearing", "hearing impaired"],
        "options": ["Normal", "Impaired", "Hearing aid", "Deaf"],
        "extraction_hints": [
            "Patient's ability to hear",
            "Any hearing problems mentioned",
            "Use of hearing aids",
        ],
    },
    {
        "field_id": "vision_status",
        "section_id": "communication",
        "label": "Vision Status",
        "field_type": "select",
        "synonyms": ["vision", "sight", "eyesight", "visual", "blind", "glasses"],
        "options": ["Normal", "Impaired", "Glasses/contacts", "Legally blind"],
        "extraction_hints": [
            "Patient's ability to see",
            "Visual impairments mentioned",
            "Use of glasses or contacts",
        ],
    },
    {
        "field_id": "language_preferred",
        "section_id": "communication",
        "label": "Preferred Language",
        "field_type": "text",
        "synonyms": ["language", "speaks", "communication language", "native language", "dialect"],
        "extraction_hints": [
            "What language patient prefers",
            "Language barriers mentioned",
            "Need for interpreter",
        ],
    },
    # ── Elimination ─────────────────────────────────────────────
    {
        "field_id": "bowel_pattern",
        "section_id": "elimination",
        "label": "Bowel Pattern",
        "field_type": "select",
        "synonyms": ["bowel movements", "BM", "defecation", "stool", "constipation", "diarrhea"],
        "options": ["Normal", "Constipated", "Diarrhea", "Incontinence"],
        "extraction_hints": [
            "Patient's bowel movement pattern",
            "Constipation or diarrhea mentioned",
            "Bowel continence status",
        ],
    },
    {
        "field_id": "urinary_pattern",
        "section_id": "elimination",
        "label": "Urinary Pattern",
        "field_type": "select",
        "synonyms": ["urination", "voiding", "urine", "bladder", "incontinence", "catheter"],
        "options": ["Normal", "Frequency", "Urgency", "Incontinence", "Retention"],
        "extraction_hints": [
            "Patient's urination pattern",
            "Bladder problems mentioned",
            "Urinary continence status",
        ],
    },
    # ── Nutrition ───────────────────────────────────────────────
    {
        "field_id": "appetite",
        "section_id": "nutrition",
        "label": "Appetite",
        "field_type": "select",
        "synonyms": ["eating", "food intake", "hunger", "appetite", "nutrition"],
        "options": ["Good", "Fair", "Poor", "NPO"],
        "extraction_hints": [
            "Patient's appetite and eating",
            "Food intake mentioned",
            "Nutritional concerns",
        ],
    },
    {
        "field_id": "dietary_restrictions",
        "section_id": "nutrition",
        "label": "Dietary Restrictions",
        "field_type": "text",
        "synonyms": ["diet", "food restrictions", "allergies", "special diet", "diabetic diet"],
        "extraction_hints": [
            "Special dietary needs",
            "Food allergies or restrictions",
            "Therapeutic diets",
        ],
    },
    # ── Social ──────────────────────────────────────────────────
    {
        "field_id": "living_arrangement",
        "section_id": "social",
        "label": "Living Arrangement",
        "field_type": "select",
        "synonyms": ["lives with", "home situation", "living situation", "family support"],
        "options": ["Lives alone", "With family", "With spouse", "Nursing home", "Assisted living"],
        "extraction_hints": [
            "Who patient lives with",
            "Home living situation",
            "Support system at home",
        ],
    },
    {
        "field_id": "discharge_planning_needs",
        "section_id": "social",
        "label": "Discharge Planning Needs",
        "field_type": "textarea",
        "synonyms": ["discharge planning", "home care needs", "follow-up care", "support needed"],
        "extraction_hints": [
            "Plans for after discharge",
            "Support needed at home",
            "Follow-up care requirements",
        ],
    },
    # ── General Information: emergency contacts ─────────────────
    {
        "field_id": "emergency_contact_1_name",
        "section_id": "general",
        "label": "Emergency Contact 1 - Name",
        "field_type": "text",
        "synonyms": ["emergency contact", "next of kin", "family contact", "contact person"],
        "extraction_hints": [
            "Primary emergency contact name",
            "Family member to contact",
            "Next of kin information",
        ],
    },
    {
        "field_id": "emergency_contact_1_relationship",
        "section_id": "general",
        "label": "Emergency Contact 1 - Relationship",
        "field_type": "text",
        "synonyms": ["relationship", "family member", "spouse", "child", "parent", "sibling"],
        "extraction_hints": [
            "Relationship to patient",
            "Family relationship",
            "How they are related",
        ],
    },
    {
        "field_id": "emergency_contact_1_phone",
        "section_id": "general",
        "label": "Emergency Contact 1 - Phone",
        "field_type": "text",
        "expected_format": "+65 #### ####",
        "synonyms": ["phone number", "contact number", "telephone", "mobile number"],
        "extraction_hints": [
            "Phone number of emergency contact",
            "Contact telephone number",
            "Mobile or home phone",
        ],
    },
]


# (field_id, section_id, label, field_type, options, synonyms)
FORM_FIELDS: list[tuple[str, str, str, str, tuple[str, ...] | None, tuple[str, ...]]] = [
    # General
    ("emergency_contact_2_name", "general", "Emergency Contact 2 - Name", "text", None, ("second contact", "alternate contact")),
    ("emergency_contact_2_relationship", "general", "Emergency Contact 2 - Relationship", "text", None, ("relationship",)),
    ("emergency_contact_2_phone", "general", "Emergency Contact 2 - Phone", "text", None, ("phone number", "contact number")),
    ("belongings_description", "general", "Belongings Brought by Patient", "textarea", None, ("belongings", "valuables", "personal items")),
    ("admission_type", "general", "Type of Admission", "radio",
     ("A&E", "Baby born in own hospital", "OPD", "Other hospital", "Other"), ("admitted from", "admission source")),
    # Physical: neurological
    ("gcs_eye", "physical", "GCS Eye Opening", "select",
     ("Spontaneously (4)", "To speech (3)", "To pain (2)", "None (1)"), ("eye opening", "GCS eye")),
    ("gcs_verbal", "physical", "GCS Verbal Response", "select",
     ("Oriented (5)", "Confused (4)", "Inappropriate words (3)", "Incomprehensible sounds (2)", "None (1)"),
     ("verbal response", "GCS verbal")),
    ("gcs_motor", "physical", "GCS Motor Response", "select",
     ("Obeys commands (6)", "Localizes to pain (5)", "Flexion withdrawal (4)", "Abnormal flexion (3)",
      "Abnormal extension (2)", "None (1)"), ("motor response", "GCS motor")),
    ("gcs_total", "physical", "GCS Total Score", "calculated", None, ("Glasgow coma scale", "GCS")),
    # Physical: vital sign details
    ("temp_method", "physical", "Temperature Method", "select",
     ("Oral", "Tympanic", "Axilla", "Rectal", "Skin"), ("ear temperature", "oral temperature")),
    ("pulse_location", "physical", "Pulse Location", "select",
     ("Radial", "Apical", "Carotid", "Brachial", "Femoral", "Popliteal", "Dorsalis pedis", "Other"), ("pulse site",)),
    ("pulse_pattern", "physical", "Pulse Pattern", "radio", ("Regular", "Irregular"), ("rhythm", "irregular pulse")),
    ("bp_position", "physical", "BP Position", "select", ("Sitting", "Standing", "Lying", "Other"), ("position",)),
    ("mean_bp", "physical", "Mean Blood Pressure", "calculated", None, ("MAP", "mean arterial pressure")),
    ("respiration_status", "physical", "Respiration", "radio", ("Normal", "Dyspnoea"),
     ("shortness of breath", "breathless", "dyspnea")),
    ("cvp", "physical", "Central Venous Pressure", "number", None, ("CVP",)),
    ("cvp_level", "physical", "CVP Level", "radio", ("Swing", "Not swing"), ("CVP swing",)),
    ("pacemaker", "physical", "Pacemaker", "radio", YES_NO, ("pacemaker", "PPM")),
    ("coughing", "physical", "Coughing", "radio", YES_NO, ("cough",)),
    ("sputum", "physical", "Sputum", "radio", YES_NO, ("phlegm", "secretions")),
    ("sputum_colour", "physical", "Sputum Colour", "select",
     ("Clear", "White", "Yellow", "Green", "Cream colour", "Coffee/Rusty", "Blood-stained"), ("phlegm colour",)),
    ("oxygen_therapy", "physical", "Oxygen Therapy", "radio", YES_NO, ("on oxygen", "O2 therapy", "supplemental oxygen")),
    ("oxygen_flow_rate", "physical", "Oxygen Flow Rate", "number", None, ("litres per minute", "O2 flow")),
    ("oxygen_via", "physical", "Oxygen Concentration", "number", None, ("FiO2", "oxygen percent")),
    ("oxygen_device", "physical", "Oxygen Device", "select", ("Mask", "Cannula", "Ventilator"), ("nasal cannula", "face mask")),
    ("weight", "physical", "Weight", "number", None, ("body weight", "kg", "weighs")),
    ("height", "physical", "Height", "number", None, ("tall", "cm", "stature")),
    ("bmi", "physical", "BMI", "calculated", None, ("body mass index",)),
    ("weight_loss_6_months", "physical", "10% Weight Loss Within 6 Months", "checkbox", None, ("lost weight", "weight loss")),
    ("blood_glucose", "physical", "Blood Glucose", "number", None, ("glucose", "sugar level", "hypo", "hstix")),
    ("lmp", "physical", "Last Menstrual Period", "text", None, ("LMP", "last period")),
    ("pregnancy_test", "physical", "Pregnancy Test", "radio", ("+ve", "-ve", "Inconclusive"), ("UPT", "pregnant")),
    ("urinalysis_sugar", "physical", "Urinalysis Sugar", "select", URINALYSIS_GRADES, ("urine sugar", "glycosuria")),
    ("urinalysis_albumin", "physical", "Urinalysis Albumin", "select", URINALYSIS_GRADES, ("urine protein", "proteinuria")),
    ("urinalysis_ketone", "physical", "Urinalysis Ketone", "select", URINALYSIS_GRADES, ("ketones",)),
    ("urinalysis_wbc", "physical", "Urinalysis White Blood Cell", "select", URINALYSIS_GRADES, ("leucocytes", "urine WBC")),
    ("urinalysis_rbc", "physical", "Urinalysis Red Blood Cell", "select", URINALYSIS_GRADES, ("haematuria", "urine RBC")),
    ("urinalysis_nitrite", "physical", "Urinalysis Nitrite", "select", URINALYSIS_GRADES, ("nitrites",)),
    ("urinalysis_remarks", "physical", "Urinalysis Remarks", "textarea", None, ("urine test remarks",)),
    ("mews_total", "physical", "MEWS Total Score", "calculated", None, ("early warning score", "MEWS")),
    # Risk: infection and isolation
    ("infection_risk_status", "risk", "Infection Risk Status", "radio", ("At risk", "Not at risk", "Unknown"), ("infection risk",)),
    ("clinical_criteria", "risk", "Clinical Criteria", "text", None, ("fever", "cough", "sore throat", "running nose")),
    ("other_symptoms", "risk", "Other Symptoms", "text", None, ("vomiting", "diarrhoea", "rash")),
    ("cpe_screening", "risk", "CPE Screening - Hospitalized Outside Hong Kong in Last 12 Months", "radio",
     ("Unknown", "No", "Yes"), ("CPE", "hospitalised overseas")),
    ("cpe_country_area", "risk", "CPE Country/Area/City", "text", None, ("country", "overseas hospital")),
    ("vre_screening", "risk", "VRE Screening - Hospitalized Outside Hong Kong in Last 12 Months", "radio",
     ("Unknown", "No", "Yes"), ("VRE",)),
    ("vre_country_area", "risk", "VRE Country/Area/City", "text", None, ("country",)),
    ("mdro_tagging", "risk", "MDRO Tagging", "radio", ("No", "Yes", "Manual update"), ("MDRO", "MRSA", "multi-drug resistant")),
    ("isolation_precaution", "risk", "Isolation Precaution", "text", None, ("airborne", "contact", "droplet", "isolation")),
    ("ftocc", "risk", "FTOCC", "text", None, ("travel history", "occupation", "clustering")),
    ("infectious_status", "risk", "Infectious Status", "radio",
     ("Not at Risk — Apply Standard Precaution", "At Risk or Unknown — Refer PCP-ID"), ("infectious",)),
    # Risk: suicide
    ("suicide_admitted_attempt", "risk", "Admitted for Suicide Attempt", "radio", YES_NO, ("suicide attempt", "overdose")),
    ("suicide_expresses_idea", "risk", "Expresses Suicidal Idea", "radio", YES_NO, ("suicidal thoughts", "wants to die")),
    ("suicide_disclosure_relatives", "risk", "Suicidal Idea Disclosed by Relatives", "radio", YES_NO, ("family reports suicidal",)),
    # Risk: falls
    ("fall_risk_level", "risk", "Fall Risk Level", "select", ("Low", "Moderate", "High"), ("fall risk",)),
    ("morse_total_score", "risk", "Morse Fall Scale Total", "calculated", None, ("Morse score",)),
    ("fall_remarks", "risk", "Fall Remarks", "textarea", None, ("fall precautions", "fall details")),
    ("missing_risk_status", "risk", "Missing/Abscond Risk", "radio", ("At risk", "Not at risk"), ("wandering", "abscond")),
    # Risk: pressure injury
    ("pressure_scale_type", "risk", "Pressure Injury Assessment Scale", "radio", ("Norton Scale", "Braden Scale"), ("Norton", "Braden")),
    ("norton_physical", "risk", "Norton Physical Condition", "select",
     ("Good (4)", "Fair (3)", "Poor (2)", "Very bad (1)"), ("physical condition",)),
    ("norton_mental", "risk", "Norton Mental Condition", "select",
     ("Alert (4)", "Apathetic (3)", "Confused (2)", "Stuporous (1)"), ("mental condition",)),
    ("norton_activity", "risk", "Norton Activity", "select",
     ("Ambulant (4)", "Walk with help (3)", "Chairfast (2)", "Bedfast (1)"), ("activity level",)),
    ("norton_mobility", "risk", "Norton Mobility", "select",
     ("Full (4)", "Slightly limited (3)", "Very limited (2)", "Immobile (1)"), ("mobility",)),
    ("norton_incontinent", "risk", "Norton Incontinence", "select",
     ("Not (4)", "Occasionally (3)", "Usually (2)", "Doubly (1)"), ("incontinence",)),
    ("norton_total", "risk", "Norton Total Score", "calculated", None, ("Norton score",)),
    ("braden_sensory", "risk", "Braden Sensory Perception", "select",
     ("Completely limited (1)", "Very limited (2)", "Slightly limited (3)", "No impairment (4)"), ("sensory perception",)),
    ("braden_moisture", "risk", "Braden Moisture", "select",
     ("Constantly moist (1)", "Very moist (2)", "Occasionally moist (3)", "Rarely moist (4)"), ("skin moisture",)),
    ("braden_activity", "risk", "Braden Activity", "select",
     ("Bedfast (1)", "Chairfast (2)", "Walks occasionally (3)", "Walks frequently (4)"), ("activity",)),
    ("braden_mobility", "risk", "Braden Mobility", "select",
     ("Completely immobile (1)", "Very limited (2)", "Slightly limited (3)", "No limitation (4)"), ("mobility",)),
    ("braden_nutrition", "risk", "Braden Nutrition", "select",
     ("Very Poor (1)", "Probably inadequate (2)", "Adequate (3)", "Excellent (4)"), ("nutrition",)),
    ("braden_friction", "risk", "Braden Friction & Shear", "select",
     ("Problem (1)", "Potential problem (2)", "No apparent problem (3)"), ("friction", "shear")),
    ("braden_total", "risk", "Braden Total Score", "calculated", None, ("Braden score",)),
    # Social
    ("education_level", "social", "Education Level", "select",
     ("No formal education", "Primary", "Secondary", "Tertiary"), ("schooling", "education")),
    ("occupation", "social", "Occupation", "text", None, ("job", "work", "retired")),
    ("insurance_type", "social", "Insurance Type", "select", ("Public", "Private", "None"), ("insurance", "medical cover")),
    ("religious_practice", "social", "Religious Practice", "radio", YES_NO, ("religion", "faith")),
    ("religious_denomination", "social", "Religious Denomination", "text", None, ("Christian", "Buddhist", "Catholic")),
    ("cultural_dietary_requirements", "social", "Cultural Dietary Requirements", "text", None, ("halal", "kosher")),
    ("personal_hygiene_independence", "social", "Personal Hygiene Independence", "select", INDEPENDENCE, ("hygiene",)),
    ("adl_independence", "social", "ADL Independence", "select", INDEPENDENCE, ("activities of daily living", "ADL")),
    ("assistance_needed", "social", "Assistance Needed", "textarea", None, ("help needed", "needs help with")),
    ("home_safety_concerns", "social", "Home Safety Concerns", "textarea", None, ("stairs", "home hazards")),
    ("smoking_status", "social", "Smoking Status", "select", ("Never", "Ex-smoker", "Current smoker"), ("smokes", "cigarettes")),
    ("alcohol_use", "social", "Alcohol Use", "select", ("None", "Occasional", "Regular"), ("drinks", "alcohol")),
    ("caregiver_name", "social", "Main Caregiver", "text", None, ("caregiver", "domestic helper", "carer")),
    # Communication / Respiration / Mobility
    ("hearing_aid", "communication", "Hearing Aid", "checkbox", None, ("hearing aid",)),
    ("hearing_left", "communication", "Hearing (Left Ear)", "select", ("Normal", "Impaired", "Deaf"), ("left ear",)),
    ("hearing_right", "communication", "Hearing (Right Ear)", "select", ("Normal", "Impaired", "Deaf"), ("right ear",)),
    ("vision_aid", "communication", "Vision Aid", "checkbox", None, ("glasses", "spectacles", "contact lenses")),
    ("vision_left", "communication", "Vision (Left Eye)", "select",
     ("Normal", "Cataract", "Glaucoma", "Blurred vision", "Blindness", "Other"), ("left eye",)),
    ("vision_right", "communication", "Vision (Right Eye)", "select",
     ("Normal", "Cataract", "Glaucoma", "Blurred vision", "Blindness", "Other"), ("right eye",)),
    ("speech_status", "communication", "Speech", "select",
     ("Clear", "Slurring", "Dysphasia", "Incomprehensible sounds"), ("speech", "slurred speech")),
    ("language_dialect", "communication", "Language / Dialect", "select",
     ("Cantonese", "English", "Mandarin", "Other"), ("speaks Cantonese", "dialect")),
    ("denture_upper", "communication", "Denture (Upper Jaw)", "select", DENTURE_TYPES, ("upper denture", "false teeth")),
    ("denture_lower", "communication", "Denture (Lower Jaw)", "select", DENTURE_TYPES, ("lower denture", "false teeth")),
    ("communication_concerns", "communication", "Communication Concerns", "textarea", None, ("interpreter", "communication barrier")),
    ("respiratory_concerns", "communication", "Respiratory Concerns", "textarea", None, ("wheeze", "breathing problem")),
    ("respiration_remarks", "communication", "Respiration Remarks", "textarea", None, ("breathing remarks",)),
    ("breathing_pattern", "communication", "Breathing Pattern", "select",
     ("Regular", "Shallow", "Laboured", "Irregular"), ("breathing",)),
    ("mobility_status", "communication", "Mobility Status", "radio",
     ("Independent", "Ambulatory with aids", "Dependent"), ("walks independently", "bedbound")),
    ("mobility_aids", "communication", "Walking Aids", "select",
     ("None", "Stick", "Quadripod", "Frame", "Wheelchair", "Crutch"), ("walking stick", "frame", "wheelchair")),
    ("transfer_ability", "communication", "Transfer Ability", "select", INDEPENDENCE, ("transfers", "bed to chair")),
    ("ambulation_distance", "communication", "Ambulation Distance", "text", None, ("walks metres", "walking distance")),
    ("mobility_limitations", "communication", "Mobility Limitations", "textarea", None, ("limited mobility",)),
    ("assisted_by", "communication", "Assisted by (persons)", "number", None, ("one assist", "two assist")),
    ("limb_upper_left", "communication", "Left Upper Limb", "select", LIMB_STATES, ("left arm",)),
    ("limb_upper_right", "communication", "Right Upper Limb", "select", LIMB_STATES, ("right arm",)),
    ("limb_lower_left", "communication", "Left Lower Limb", "select", LIMB_STATES, ("left leg",)),
    ("limb_lower_right", "communication", "Right Lower Limb", "select", LIMB_STATES, ("right leg",)),
    # Elimination
    ("last_bowel_movement", "elimination", "Last Bowel Movement", "text", None, ("last opened bowels", "BO")),
    ("bowel_continence", "elimination", "Bowel Continence", "radio", ("Continent", "Incontinent"), ("faecal incontinence",)),
    ("bowel_concerns", "elimination", "Bowel Concerns", "textarea", None, ("bowel problems",)),
    ("bowel_stoma", "elimination", "Stoma", "checkbox", None, ("colostomy", "ileostomy", "stoma bag")),
    ("urinary_continence", "elimination", "Urinary Continence", "radio", ("Continent", "Incontinent"), ("urinary incontinence",)),
    ("urinary_concerns", "elimination", "Urinary Concerns", "textarea", None, ("urinary problems", "dysuria")),
    ("urinary_dysuria", "elimination", "Dysuria", "checkbox", None, ("painful urination", "burning urine")),
    ("urinary_catheter", "elimination", "Urinary Catheter", "checkbox", None, ("foley", "catheter", "IDC")),
    ("urinary_catheter_site", "elimination", "Urinary Catheter Site", "select", ("Urethral", "Suprapubic"), ("suprapubic catheter",)),
    ("urinary_catheter_size", "elimination", "Urinary Catheter Size", "text", None, ("French", "Fr")),
    ("catheter_type", "elimination", "Catheter Type", "select", ("Latex", "Silicone"), ("catheter material",)),
    ("urinary_catheter_change_days", "elimination", "Catheter Change Interval (days)", "number", None, ("change every",)),
    ("self_catheterization", "elimination", "Self Catheterization", "checkbox", None, ("self catheterises", "ISC")),
    ("catheterization_times_per_day", "elimination", "Catheterization Times per Day", "number", None, ("times a day",)),
    ("elimination_aids", "elimination", "Elimination Aids", "select",
     ("None", "Commode", "Diaper", "Bedpan / Urinal", "Incontinence diaper"), ("commode", "diaper", "bedpan")),
    ("elimination_assistance", "elimination", "Elimination Assistance", "select", INDEPENDENCE, ("toileting help",)),
    # Nutrition / Self-Care
    ("food_allergies", "nutrition", "Food Allergies", "text", None, ("allergic to", "food allergy")),
    ("swallowing_status", "nutrition", "Swallowing Status", "select",
     ("Normal", "Dysphagia", "Nil by mouth"), ("swallowing", "dysphagia", "choking")),
    ("feeding_assistance", "nutrition", "Oral Feeding", "radio",
     ("Self-help", "With assistance", "By others"), ("feeds self", "needs feeding")),
    ("diet", "nutrition", "Diet", "select",
     ("Normal", "Soft", "Minced", "Pureed", "Fluid", "Diabetic", "Low salt", "NPO"), ("diet type",)),
    ("thickener_for_dysphagia", "nutrition", "Thickener for Dysphagia", "text", None, ("thickener", "thickened fluids")),
    ("food_preference", "nutrition", "Food Preference", "text", None, ("vegetarian", "no pork", "no beef")),
    ("oral_supplement", "nutrition", "Oral Supplement", "text", None, ("milk supplement", "Ensure")),
    ("fluid_intake", "nutrition", "Fluid Intake", "text", None, ("drinks", "fluids", "ml per day")),
    ("nutrition_concerns", "nutrition", "Nutrition Concerns", "textarea", None, ("poor intake", "malnutrition")),
    ("tube_feeding", "nutrition", "Tube Feeding", "checkbox", None, ("NG tube", "PEG")),
    ("tube_feeding_type", "nutrition", "Tube Feeding Type", "radio",
     ("Nasogastric", "PEG", "Gastrostomy", "Gastro-duodenal"), ("Ryle's tube", "NG")),
    ("tube_feeding_feeds_per_day", "nutrition", "Feeds per Day", "number", None, ("feeds a day",)),
    ("tube_feeding_ml_per_meal", "nutrition", "Feed Volume per Meal", "number", None, ("ml per feed",)),
    ("tube_feeding_type_of_feed", "nutrition", "Type of Feed", "text", None, ("formula",)),
    ("tube_feeding_remarks", "nutrition", "Tube Feeding Remarks", "textarea", None, ("feeding remarks",)),
    ("mst_q1", "nutrition", "MST Unintentional Weight Loss", "radio",
     ("No (0)", "Unsure (2)", "Yes (1)"), ("lost weight without trying",)),
    ("mst_q1_weight_amount", "nutrition", "MST Weight Loss Amount", "radio",
     ("1-5 (1)", "6-10 (2)", "11-15 (3)", ">15 (4)", "Unsure (2)"), ("kg lost",)),
    ("mst_q2", "nutrition", "MST Poor Appetite", "radio", ("No (0)", "Yes (1)"), ("eating poorly", "decreased appetite")),
    ("mst_total_score", "nutrition", "MST Total Score", "calculated", None, ("malnutrition screening",)),
    ("bathing_independence", "nutrition", "Bathing", "select", INDEPENDENCE, ("bathing", "showering")),
    ("dressing_independence", "nutrition", "Dressing", "select", INDEPENDENCE, ("dressing", "gets dressed")),
    ("grooming_independence", "nutrition", "Grooming", "select", INDEPENDENCE, ("grooming", "shaving")),
    ("toileting_independence", "nutrition", "Toileting", "select", INDEPENDENCE, ("toileting",)),
    ("self_care_status", "nutrition", "Self Care Status", "radio", INDEPENDENCE, ("self care",)),
    ("self_care_assistance", "nutrition", "Self Care Assistance", "textarea", None, ("needs help with care",)),
    ("self_care_concerns", "nutrition", "Self Care Concerns", "textarea", None, ("self care problems",)),
    # Skin / Pain
    ("skin_condition", "skin-pain", "Skin Condition", "select",
     ("Intact", "Dry", "Oedematous", "Jaundiced", "Pale", "Cyanosed"), ("skin", "oedema", "jaundice")),
    ("skin_integrity", "skin-pain", "Skin Integrity", "radio", ("Intact", "Impaired"), ("skin breakdown",)),
    ("pressure_ulcer_risk", "skin-pain", "Pressure Injury Present", "radio", YES_NO, ("bedsore", "pressure sore", "pressure injury")),
    ("wound_assessment", "skin-pain", "Wound Assessment", "textarea", None, ("wound", "dressing", "ulcer")),
    ("wound_location", "skin-pain", "Wound Location", "text", None, ("wound site",)),
    ("pain_status", "skin-pain", "Pain Status", "radio", ("No pain", "Acute pain", "Chronic pain"), ("in pain", "painful")),
    ("pain_quality", "skin-pain", "Pain Quality", "select",
     ("Sharp", "Dull", "Aching", "Burning", "Throbbing", "Stabbing"), ("type of pain", "sharp pain", "dull ache")),
    ("pain_duration", "skin-pain", "Pain Duration", "text", None, ("how long pain", "since")),
    ("pain_management", "skin-pain", "Pain Management", "textarea", None, ("painkiller", "analgesia", "panadol")),
    ("skin_concerns", "skin-pain", "Skin Concerns", "textarea", None, ("rash", "itchy", "bruising")),
    ("pain_concerns", "skin-pain", "Pain Concerns", "textarea", None, ("pain problems",)),
    ("comfort_measures", "skin-pain", "Comfort Measures", "textarea", None, ("repositioning", "hot pack")),
    # Emotion / Remark
    ("emotional_state", "emotion-remark", "Emotional Status", "radio",
     ("Stable", "Depressed", "Confused", "Agitated", "Others"), ("mood", "anxious", "low mood", "agitated")),
    ("assessment_remarks", "emotion-remark", "General Remarks", "textarea", None, ("remarks", "notes")),
]
