"""Well-known API family and shading-language names used in the features document."""

GL_NAME = "OpenGL"
GLES_NAME = "OpenGL ES"
GLSL_NAME = "GLSL"
GLSL_ES_NAME = "GLSL ES"
